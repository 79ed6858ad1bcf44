"""
Parcel schema and model tests.
"""

from datetime import datetime

import pytest
from pydantic import ValidationError

from tracker.app.models.parcel import Parcel
from tracker.app.models.parcel_enums import ParcelStatus
from tracker.app.schemas.parcel import ParcelCreate, ParcelResponse, utc_now_rfc3339


def test_status_values():
    assert [status.value for status in ParcelStatus] == ["registered", "sent", "delivered"]
    assert ParcelStatus("sent") is ParcelStatus.SENT


def test_create_defaults():
    parcel = ParcelCreate(client=7, address="somewhere")

    assert parcel.status == ParcelStatus.REGISTERED
    assert parcel.created_at.endswith("Z")
    datetime.strptime(parcel.created_at, "%Y-%m-%dT%H:%M:%SZ")


def test_utc_now_format():
    value = utc_now_rfc3339()
    assert len(value) == 20
    assert value[10] == "T"


@pytest.mark.parametrize("created_at", [
    "2024-01-01T00:00:00Z",
    "2024-01-01t00:00:00z",
    "2024-01-01T00:00:00.123456789Z",
    "2024-01-01T00:00:00+00:00",
    "2024-01-01T00:00:00-00:00",
])
def test_accepts_rfc3339_utc(created_at):
    parcel = ParcelCreate(client=1, address="a", created_at=created_at)
    assert parcel.created_at == created_at


@pytest.mark.parametrize("created_at", [
    "yesterday",
    "",
    "2024-01-01T00:00:00",
    "20240101T000000Z",
    "2024-W01-1T00:00:00Z",
    "2024-01-01T00Z",
    "2024-01-01 00:00:00Z",
    "2024-02-30T00:00:00Z",
    "2024-01-01T00:00:00Z\n",
])
def test_rejects_non_rfc3339_timestamp(created_at):
    with pytest.raises(ValidationError, match="RFC3339"):
        ParcelCreate(client=1, address="a", created_at=created_at)


@pytest.mark.parametrize("created_at", ["2024-01-01T03:00:00+03:00", "2023-12-31T19:00:00-05:00"])
def test_rejects_non_utc_offset(created_at):
    with pytest.raises(ValidationError, match="UTC"):
        ParcelCreate(client=1, address="a", created_at=created_at)


def test_rejects_unknown_status():
    with pytest.raises(ValidationError):
        ParcelCreate(client=1, address="a", status="lost")


def test_response_requires_positive_number():
    with pytest.raises(ValidationError):
        ParcelResponse(number=0, client=1, address="a", created_at="2024-01-01T00:00:00Z")


def test_response_from_orm_row():
    row = Parcel(
        number=3,
        client=1000,
        status=ParcelStatus.SENT,
        address="test",
        created_at="2024-01-01T00:00:00Z",
    )

    parcel = ParcelResponse.model_validate(row)

    assert parcel.number == 3
    assert parcel.status == ParcelStatus.SENT
    assert "number=3" in repr(row)
