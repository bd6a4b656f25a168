from typing import Protocol, Any


class Serializer(Protocol):
    """
    Defines the interface for encoding/decoding values as JSON text.

    Implementations must be:
    - deterministic
    - pure (no side effects besides logging)
    - safe to share between threads once constructed
    """

    def serialize(self, value: Any) -> str:
        """Encode a Python object into JSON text."""

    def deserialize(self, text: str | bytes, target: Any) -> Any:
        """Decode JSON text into an instance of ``target``."""
