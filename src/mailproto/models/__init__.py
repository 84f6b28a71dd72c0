"""Domain values for mailproto.

This module contains frozen Pydantic models handed back to the session layer.
"""

from mailproto.models.message import Address, Content, Message, Preview
from mailproto.models.pop3 import (
    Capabilities,
    Capability,
    ExpireCapability,
    ImplementationCapability,
    LoginDelayCapability,
    PipeliningCapability,
    RespCodesCapability,
    SaslCapability,
    Stats,
    TopCapability,
    UidlCapability,
    UniqueID,
    UserCapability,
)

__all__ = [
    "Address",
    "Capabilities",
    "Capability",
    "Content",
    "ExpireCapability",
    "ImplementationCapability",
    "LoginDelayCapability",
    "Message",
    "PipeliningCapability",
    "Preview",
    "RespCodesCapability",
    "SaslCapability",
    "Stats",
    "TopCapability",
    "UidlCapability",
    "UniqueID",
    "UserCapability",
]
