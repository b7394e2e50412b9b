"""Identifier generation for commits."""


class CommitIdGenerator:
    """Hands out monotonically increasing commit identifiers.

    Identifiers are the string form of an integer counter starting at zero.
    The counter is post-incremented, so the first identifier is ``"0"``.
    """

    def __init__(self) -> None:
        self._next = 0

    def next_id(self) -> str:
        """Return the next identifier and advance the counter."""
        current = self._next
        self._next += 1
        return str(current)

    def peek(self) -> int:
        return self._next

    def reset(self) -> None:
        """Restore the counter to zero. Only meant for test isolation."""
        self._next = 0


_shared_generator = CommitIdGenerator()


def shared_generator() -> CommitIdGenerator:
    """Get the process-wide generator used by repositories by default."""
    return _shared_generator


def reset_identifier_generator() -> None:
    """Reset the process-wide generator back to ``"0"``."""
    _shared_generator.reset()
