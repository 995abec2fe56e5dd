"""Converter configuration."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ConverterConfig(BaseModel):
    """Immutable flags read when building inbound envelopes.

    Attributes:
        generate_message_id: Give each envelope a fresh id instead of
            ``ID_VALUE_NONE``.
        generate_timestamp: Stamp each envelope with wall-clock milliseconds
            instead of ``-1``.
    """

    model_config = ConfigDict(frozen=True)

    generate_message_id: bool = False
    generate_timestamp: bool = False
