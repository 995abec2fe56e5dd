"""Tests for converter exceptions."""

from __future__ import annotations

from kafka_message_converter.exceptions import (
    ConverterError,
    HeaderTypeError,
    MessagingConnectionError,
    MessagingError,
    MissingTopicError,
)


def test_hierarchy() -> None:
    assert issubclass(MessagingError, ConverterError)
    assert issubclass(MissingTopicError, MessagingError)
    assert issubclass(MessagingConnectionError, MessagingError)
    assert issubclass(HeaderTypeError, ConverterError)
    assert issubclass(HeaderTypeError, TypeError)


def test_header_type_error_message() -> None:
    e = HeaderTypeError("partition", int, "3")
    assert e.actual == "3"
    assert "partition" in str(e)
    assert "int" in str(e)
    assert "str" in str(e)
