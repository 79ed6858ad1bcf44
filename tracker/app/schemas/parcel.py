"""
Parcel Pydantic schemas.

Value objects passed into and returned from the parcel store.
"""

import re
from datetime import datetime, timezone
from pydantic import BaseModel, ConfigDict, Field, field_validator
from tracker.app.models.parcel_enums import ParcelStatus

RFC3339_FORMAT = "%Y-%m-%dT%H:%M:%SZ"
RFC3339_PATTERN = re.compile(
    r"^(\d{4})-(\d{2})-(\d{2})[Tt](\d{2}):(\d{2}):(\d{2})(?:\.\d+)?([Zz]|[+-]\d{2}:\d{2})$"
)


def utc_now_rfc3339() -> str:
    """Current UTC time in the format parcels are stored with."""
    return datetime.now(timezone.utc).strftime(RFC3339_FORMAT)


class ParcelCreate(BaseModel):
    """Schema for registering a new parcel."""
    client: int = Field(..., description="Owning client identifier")
    status: ParcelStatus = Field(default=ParcelStatus.REGISTERED, description="Delivery status")
    address: str = Field(..., description="Delivery address")
    created_at: str = Field(default_factory=utc_now_rfc3339, description="RFC3339 UTC creation time")
    
    @field_validator("created_at")
    @classmethod
    def validate_created_at(cls, value: str) -> str:
        match = RFC3339_PATTERN.fullmatch(value)
        if match is None:
            raise ValueError(f"created_at must be an RFC3339 timestamp, got {value!r}")
        
        year, month, day, hour, minute, second, offset = match.groups()
        try:
            datetime(int(year), int(month), int(day), int(hour), int(minute), int(second))
        except ValueError as exc:
            raise ValueError(f"created_at must be an RFC3339 timestamp, got {value!r}") from exc
        
        if offset.upper() != "Z" and offset[1:] != "00:00":
            raise ValueError(f"created_at must be in UTC, got offset {offset}")
        return value


class ParcelResponse(ParcelCreate):
    """Schema for a stored parcel."""
    number: int = Field(..., gt=0, description="Store-assigned parcel number")
    
    model_config = ConfigDict(from_attributes=True)
