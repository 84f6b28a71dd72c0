"""Protocol-agnostic message values projected from IMAP fetch results."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Address(BaseModel):
    """A display name and a ``mailbox@host`` address, each optional."""

    model_config = ConfigDict(frozen=True)

    display_name: str | None = Field(default=None, description="Display name")
    address: str | None = Field(default=None, description="mailbox@host, only when both halves exist")


class Content(BaseModel):
    """Text and HTML renditions of a message body."""

    model_config = ConfigDict(frozen=True)

    text: str | None = Field(default=None, description="text/plain body")
    html: str | None = Field(default=None, description="text/html body")


class Preview(BaseModel):
    """Lightweight projection used for message listings."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    from_: tuple[Address, ...] = Field(default=(), alias="from", description="Sender addresses")
    id: str = Field(description="Server-assigned unique identifier")
    sent: int | None = Field(default=None, description="Internal date in seconds since epoch")
    subject: str | None = Field(default=None, description="Subject header")


class Message(BaseModel):
    """Full projection of a fetched message."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    from_: tuple[Address, ...] = Field(default=(), alias="from", description="Sender addresses")
    to: tuple[Address, ...] = Field(default=(), description="To recipients")
    cc: tuple[Address, ...] = Field(default=(), description="Cc recipients")
    bcc: tuple[Address, ...] = Field(default=(), description="Bcc recipients")
    id: str = Field(description="Server-assigned unique identifier")
    sent: int | None = Field(default=None, description="Internal date in seconds since epoch")
    subject: str | None = Field(default=None, description="Subject header")
    content: Content = Field(default_factory=Content, description="Selected body content")
