"""Dual-channel key buffer.

Every encoding decision appends to a primary channel and, optionally, a
different secondary channel. Either side of an append may be None to leave
that channel alone.
"""

from typing import Callable

from .trace import PRIMARY, SECONDARY

# The vowel marker; never appended twice in a row to the same channel.
VOWEL_MARKER = "A"

AppendHook = Callable[[str, str], None]


class KeyBuffer:
    """Primary and secondary key under construction.

    The lists are reused across resets so a long-lived encoder does not
    reallocate for every word.
    """

    def __init__(self, capacity: int = 8):
        self.capacity = capacity
        self._primary: list[str] = []
        self._secondary: list[str] = []
        self.on_append: AppendHook | None = None

    def reset(self) -> None:
        self._primary.clear()
        self._secondary.clear()

    def add(self, primary: str | None, secondary: str | None = None) -> None:
        """Append to both channels.

        Args:
            primary: Symbol(s) for the primary key, None or "" to skip it.
            secondary: Symbol(s) for the secondary key, None or "" to skip it.
        """
        self._append(self._primary, PRIMARY, primary)
        self._append(self._secondary, SECONDARY, secondary)

    def _append(self, channel: list[str], name: str, symbol: str | None) -> None:
        if not symbol:
            return
        if symbol == VOWEL_MARKER and channel and channel[-1] == VOWEL_MARKER:
            return
        channel.extend(symbol)
        if self.on_append is not None:
            self.on_append(name, symbol)

    @property
    def primary(self) -> str:
        return "".join(self._primary)

    @property
    def secondary(self) -> str:
        return "".join(self._secondary)

    def last_primary(self) -> str | None:
        """Last symbol of the primary channel, None when empty."""
        return self._primary[-1] if self._primary else None

    def both_full(self, limit: int) -> bool:
        """True once both channels hold at least ``limit`` symbols."""
        return len(self._primary) >= limit and len(self._secondary) >= limit

    def truncate(self, limit: int) -> None:
        del self._primary[limit:]
        del self._secondary[limit:]

    def result(self, limit: int) -> tuple[str, str]:
        """Final (primary, secondary) pair.

        Both channels are cut to ``limit``. The secondary comes back empty
        when it equals the primary.
        """
        self.truncate(limit)
        primary, secondary = self.primary, self.secondary
        if primary == secondary:
            return primary, ""
        return primary, secondary

    def __len__(self) -> int:
        return len(self._primary)

    def __repr__(self) -> str:
        return f"KeyBuffer(primary={self.primary!r}, secondary={self.secondary!r})"
