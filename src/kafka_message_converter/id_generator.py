import uuid
from typing import Protocol


class IIDGenerator(Protocol):
    """
    Protocol for envelope identity generation.
    Implementations must return a fresh UUID on every call.
    """

    def next_id(self) -> uuid.UUID:
        """Generates the next unique identifier."""
        ...


class UUID4Generator(IIDGenerator):
    """
    Random UUIDv4 identities for envelopes built with id generation on.
    """

    def next_id(self) -> uuid.UUID:
        """Returns a random UUIDv4."""
        return uuid.uuid4()
