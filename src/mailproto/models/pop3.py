"""POP3 domain values: drop statistics, unique ids and capabilities."""

from __future__ import annotations

from datetime import timedelta
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

U32_MAX = 2**32 - 1
U64_MAX = 2**64 - 1


class Stats(BaseModel):
    """Message count and size in octets, as returned by STAT and LIST."""

    model_config = ConfigDict(frozen=True)

    message_count: int = Field(ge=0, le=U32_MAX, description="Number of messages")
    drop_size: int = Field(ge=0, le=U64_MAX, description="Size in octets")


class UniqueID(BaseModel):
    """A UIDL entry: message number and the server's opaque identifier."""

    model_config = ConfigDict(frozen=True)

    message_index: int = Field(ge=0, le=U32_MAX, description="Message number")
    unique_id: str = Field(description="Opaque unique-id listing value")


class _CapabilityBase(BaseModel):
    model_config = ConfigDict(frozen=True)


class TopCapability(_CapabilityBase):
    type: Literal["top"] = "top"


class UserCapability(_CapabilityBase):
    type: Literal["user"] = "user"


class SaslCapability(_CapabilityBase):
    type: Literal["sasl"] = "sasl"
    mechanisms: tuple[str, ...] = Field(default=(), description="Advertised SASL mechanisms")


class RespCodesCapability(_CapabilityBase):
    type: Literal["resp_codes"] = "resp_codes"


class LoginDelayCapability(_CapabilityBase):
    type: Literal["login_delay"] = "login_delay"
    delay: timedelta = Field(default=timedelta(0), description="Minimum delay between logins")


class PipeliningCapability(_CapabilityBase):
    type: Literal["pipelining"] = "pipelining"


class ExpireCapability(_CapabilityBase):
    type: Literal["expire"] = "expire"
    # None means messages never expire.
    expires: timedelta | None = Field(default=None, description="Retention period")


class UidlCapability(_CapabilityBase):
    type: Literal["uidl"] = "uidl"


class ImplementationCapability(_CapabilityBase):
    type: Literal["implementation"] = "implementation"
    name: str = Field(default="", description="Free-form server implementation text")


Capability = Annotated[
    Union[
        TopCapability,
        UserCapability,
        SaslCapability,
        RespCodesCapability,
        LoginDelayCapability,
        PipeliningCapability,
        ExpireCapability,
        UidlCapability,
        ImplementationCapability,
    ],
    Field(discriminator="type"),
]

Capabilities = list[Capability]
