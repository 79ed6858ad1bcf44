"""
Parcel store.

Record-level access to the ``parcel`` table over a caller-owned session.
Every operation issues a single statement; writes are committed
immediately. Address changes and deletion only apply to REGISTERED
parcels and silently affect zero rows otherwise.
"""

from typing import List, Union
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update, delete

from tracker.app.core.exceptions import ParcelNotFoundError, PersistenceError
from tracker.app.core.observability import logger, log_context
from tracker.app.models.parcel import Parcel
from tracker.app.models.parcel_enums import ParcelStatus
from tracker.app.schemas.parcel import ParcelCreate, ParcelResponse


class ParcelStore:
    """
    Data-access object for parcels.

    The session is opened and closed by the caller. The store keeps no
    state of its own besides the session reference.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def add(self, parcel: ParcelCreate) -> int:
        """
        Insert a parcel and return its generated number.

        Any ``number`` already set on the input is ignored.

        Raises:
            PersistenceError: If the insert fails
        """
        row = Parcel(
            client=parcel.client,
            status=parcel.status,
            address=parcel.address,
            created_at=parcel.created_at,
        )

        try:
            self.db.add(row)
            await self.db.flush()
            number = row.number
            await self.db.commit()
        except PersistenceError:
            await self._rollback("add", client=parcel.client)
            raise

        logger.info("Parcel added", extra=log_context(number=number, client=parcel.client))
        return number

    async def get(self, number: int) -> ParcelResponse:
        """
        Fetch one parcel by number.

        Raises:
            ParcelNotFoundError: If no parcel has this number
            PersistenceError: If the query fails
        """
        try:
            result = await self.db.execute(
                select(Parcel)
                .where(Parcel.number == number)
                .execution_options(populate_existing=True)
            )
        except PersistenceError:
            await self._rollback("get", number=number)
            raise

        row = result.scalar_one_or_none()
        if row is None:
            logger.debug("Parcel not found", extra=log_context(number=number))
            raise ParcelNotFoundError(number)

        return ParcelResponse.model_validate(row)

    async def get_by_client(self, client: int) -> List[ParcelResponse]:
        """Fetch every parcel of a client, in no particular order."""
        try:
            result = await self.db.execute(
                select(Parcel)
                .where(Parcel.client == client)
                .execution_options(populate_existing=True)
            )
        except PersistenceError:
            await self._rollback("get_by_client", client=client)
            raise

        parcels = [ParcelResponse.model_validate(row) for row in result.scalars().all()]
        logger.debug("Client parcels loaded", extra=log_context(client=client, count=len(parcels)))
        return parcels

    async def set_address(self, number: int, address: str) -> int:
        """
        Change the address of a REGISTERED parcel.

        Returns:
            Rows affected; 0 when the parcel is missing or not REGISTERED
        """
        stmt = (
            update(Parcel)
            .where(Parcel.number == number, Parcel.status == ParcelStatus.REGISTERED)
            .values(address=address)
        )
        return await self._write("set_address", stmt, number)

    async def set_status(self, number: int, status: Union[ParcelStatus, str]) -> int:
        """
        Change the status of a parcel. No transition rules are applied.

        Raises:
            ValueError: If status is not a known ParcelStatus value

        Returns:
            Rows affected; 0 when the parcel is missing
        """
        status = ParcelStatus(status)
        stmt = (
            update(Parcel)
            .where(Parcel.number == number)
            .values(status=status)
        )
        return await self._write("set_status", stmt, number)

    async def delete(self, number: int) -> int:
        """
        Delete a REGISTERED parcel.

        Returns:
            Rows affected; 0 when the parcel is missing or not REGISTERED
        """
        stmt = delete(Parcel).where(
            Parcel.number == number,
            Parcel.status == ParcelStatus.REGISTERED
        )
        return await self._write("delete", stmt, number)

    async def _write(self, operation: str, stmt, number: int) -> int:
        try:
            result = await self.db.execute(
                stmt.execution_options(synchronize_session=False)
            )
            await self.db.commit()
        except PersistenceError:
            await self._rollback(operation, number=number)
            raise

        rows = result.rowcount
        if rows:
            logger.info("Parcel updated", extra=log_context(operation=operation, number=number))
        else:
            # Missing parcel or guard blocked the write
            logger.info("Parcel unchanged", extra=log_context(operation=operation, number=number))
        return rows

    async def _rollback(self, operation: str, **fields) -> None:
        """
        Log the failure being handled and roll the session back.

        A failing rollback is logged and suppressed so the caller re-raises
        the original error.
        """
        logger.error(
            "Parcel store operation failed",
            exc_info=True,
            extra=log_context(operation=operation, **fields)
        )
        try:
            await self.db.rollback()
        except Exception:
            logger.error(
                "Parcel store rollback failed",
                exc_info=True,
                extra=log_context(operation=operation, **fields)
            )
