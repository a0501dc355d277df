"""
Handle capability interface.

The pool never touches driver objects directly; it only asks a handle
whether it is alive (before lending it out) and whether it is active
(before taking it back).
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class PoolHandle(Protocol):
    """A driver-owned connection the pool can lend out and take back."""

    def is_alive(self) -> bool:
        """Probe the server; True if the connection can still run queries."""
        ...

    def is_active(self) -> bool:
        """True if the handle is still connected and may be cached again."""
        ...

    def close(self) -> None:
        """Release the underlying connection."""
        ...
