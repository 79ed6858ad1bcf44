"""
Parcel database model.

A single ``parcel`` table keyed by an auto-incremented number.
"""

from sqlalchemy import Column, Integer, String, Enum
from tracker.app.db.session import Base
from tracker.app.models.parcel_enums import ParcelStatus


class Parcel(Base):
    """
    Parcel row.
    
    ``status`` is stored as its value string and ``created_at`` as an
    RFC3339 UTC string.
    """
    __tablename__ = "parcel"
    # Numbers of deleted parcels are never handed out again
    __table_args__ = {"sqlite_autoincrement": True}
    
    number = Column(Integer, primary_key=True, autoincrement=True)
    client = Column(Integer, nullable=False, index=True)
    status = Column(
        Enum(
            ParcelStatus,
            native_enum=False,
            length=16,
            values_callable=lambda enum_cls: [member.value for member in enum_cls],
        ),
        default=ParcelStatus.REGISTERED,
        nullable=False,
    )
    address = Column(String, nullable=False)
    created_at = Column(String(32), nullable=False)
    
    def __repr__(self):
        return f"<Parcel(number={self.number}, client={self.client}, status='{self.status.value}')>"
