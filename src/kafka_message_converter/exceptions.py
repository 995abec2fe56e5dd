"""Exceptions for kafka-message-converter."""

from __future__ import annotations


class ConverterError(Exception):
    """Root exception for the converter toolkit."""


class HeaderTypeError(ConverterError, TypeError):
    """Raised when a header is present but holds a value of the wrong type."""

    def __init__(self, key: str, expected: type, actual: object) -> None:
        self.key = key
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Header {key!r} expected {expected.__name__}, "
            f"got {type(actual).__name__}: {actual!r}"
        )


class MessagingError(ConverterError):
    """Base class for all transport-related errors."""


class MissingTopicError(MessagingError):
    """Raised when an outbound record has no topic to be sent to.

    Neither the ``topic`` header nor a default topic supplied a value.
    """


class MessagingConnectionError(MessagingError):
    """Raised when connectivity to the Kafka cluster fails."""
