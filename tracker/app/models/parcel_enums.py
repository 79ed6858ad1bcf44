"""
Parcel Status Enumeration.
"""

import enum


class ParcelStatus(str, enum.Enum):
    """
    Parcel status enumeration.
    
    Stored as the lowercase value string.
    Address changes and deletion are only allowed while REGISTERED.
    """
    REGISTERED = "registered"
    SENT = "sent"
    DELIVERED = "delivered"
