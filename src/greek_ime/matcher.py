"""
Incremental longest-match translator over a RuleTable.

Feeds one key symbol at a time, buffers keys while a longer rule could still
match, and commits output as soon as the table proves the buffer cannot
extend.  Anything the table cannot place is passed through literally, so no
keystroke is ever lost.

Usage:
    from greek_ime.matcher import Matcher, transliterate
    from greek_ime.greek import default_table

    m = Matcher(default_table())
    for key in "lo/gos ":
        for commit in m.feed(key):
            print(commit.text, end="")
    last = m.flush()                    # resolve whatever is still pending

    transliterate("lo/gos")             # -> "λόγος"
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Iterable
from dataclasses import dataclass

from greek_ime.greek import ESCAPE, default_table
from greek_ime.table import EscapeConflictError, MatchKind, RuleTable

_LOGGER = logging.getLogger(__name__)


class MatchState(enum.Enum):
    IDLE = "idle"
    PENDING = "pending"
    ESCAPED = "escaped"


@dataclass(frozen=True, slots=True)
class Commit:
    """Output handed to the host, with the keys it consumed."""

    output: tuple[str, ...]
    keys: tuple[str, ...]
    literal: bool = False  # keys passed through untranslated

    @property
    def text(self) -> str:
        return "".join(self.output)

    def __repr__(self) -> str:
        tag = " literal" if self.literal else ""
        return f"Commit({''.join(self.keys)!r} -> {self.text!r}{tag})"


class Matcher:
    """
    One input session's translation state machine.

    The table is shared and read-only; the buffer, the best complete match
    seen for it, and the escape flag belong to this matcher alone.  Create
    one Matcher per session rather than sharing one between callers.

    States:
        IDLE     nothing buffered
        PENDING  buffered keys form a prefix of at least one longer rule
        ESCAPED  the escape marker was typed; the next key passes through

    A pending buffer is resolved when the next key breaks every candidate
    rule, or when the host calls flush() (end of session, focus loss,
    idle timeout).
    """

    def __init__(
        self,
        table: RuleTable,
        escape: str | None = ESCAPE,
        remember: bool = False,
    ):
        if escape is not None and table.lookup((escape,)).kind is not MatchKind.NO_MATCH:
            raise EscapeConflictError(f"Escape marker {escape!r} starts a rule in the table")

        self.table = table
        self.escape = escape
        self.remember = remember
        # first key symbol -> last output committed for a rule starting with it
        self.memory: dict[str, tuple[str, ...]] = {}

        self._buffer: list[str] = []
        self._best: tuple[int, tuple[str, ...]] | None = None  # (prefix length, output)
        self._escaped = False

    # ── Introspection ───────────────────────────────────────────────────────

    @property
    def state(self) -> MatchState:
        if self._escaped:
            return MatchState.ESCAPED
        if self._buffer:
            return MatchState.PENDING
        return MatchState.IDLE

    @property
    def pending(self) -> tuple[str, ...]:
        """Keys buffered since the last commit."""
        return tuple(self._buffer)

    @property
    def preedit(self) -> str:
        """Preview of what flush() would produce, for hosts that show it."""
        if self._escaped:
            return self.escape or ""
        if self._best is not None:
            length, output = self._best
            return "".join(output) + "".join(self._buffer[length:])
        return "".join(self._buffer)

    # ── Input ───────────────────────────────────────────────────────────────

    def feed(self, key: str) -> list[Commit]:
        """Consume one key symbol; return the commits it caused, in order."""
        commits: list[Commit] = []
        self._step(key, commits)
        return commits

    def feed_all(self, keys: Iterable[str]) -> list[Commit]:
        commits: list[Commit] = []
        for key in keys:
            self._step(key, commits)
        return commits

    def flush(self) -> Commit | None:
        """Resolve everything buffered and return it as one commit.

        The best complete match is committed and the keys after it are
        replayed.  A buffer with no complete match passes through literally
        as a whole.  Returns None if nothing was pending.  A dangling escape
        marker is discarded, never emitted.
        """
        if self._escaped and not self._buffer:
            self._escaped = False
            _LOGGER.debug("Flush discarded a dangling escape marker")
            return None
        if not self._buffer:
            return None

        commits: list[Commit] = []
        while self._buffer:
            if self._best is None:
                keys = tuple(self._buffer)
                commits.append(Commit(output=keys, keys=keys, literal=True))
                self._buffer = []
            else:
                self._resolve(commits)
        self._escaped = False

        return Commit(
            output=tuple(sym for c in commits for sym in c.output),
            keys=tuple(k for c in commits for k in c.keys),
            literal=all(c.literal for c in commits),
        )

    def reset(self, forget: bool = False) -> None:
        """Discard pending keys without emitting them."""
        if self._buffer:
            _LOGGER.debug("Reset discarded pending keys %r", "".join(self._buffer))
        self._buffer = []
        self._best = None
        self._escaped = False
        if forget:
            self.memory.clear()

    # ── State machine ───────────────────────────────────────────────────────

    def _step(self, key: str, commits: list[Commit]) -> None:
        if self._escaped:
            self._escaped = False
            commits.append(Commit(output=(key,), keys=(self.escape, key), literal=True))
            return

        if not self._buffer and key == self.escape:
            self._escaped = True
            return

        self._buffer.append(key)
        result = self.table.lookup(self._buffer)

        if result.kind is MatchKind.NO_MATCH:
            self._resolve(commits)
        elif result.kind is MatchKind.EXACT:
            self._best = (len(self._buffer), result.output)
            self._resolve(commits)
        elif result.kind is MatchKind.EXACT_AND_EXTENDABLE:
            self._best = (len(self._buffer), result.output)
        # PREFIX_ONLY: keep waiting

    def _resolve(self, commits: list[Commit]) -> None:
        """Commit the head of the buffer and replay the rest from IDLE.

        The head is the best complete match recorded for the buffer, or the
        first key alone (passed through) when no prefix ever matched.
        """
        buffer = self._buffer
        if self._best is not None:
            length, output = self._best
            keys = tuple(buffer[:length])
            commits.append(Commit(output=output, keys=keys))
            if self.remember:
                self.memory[keys[0]] = output
        else:
            length = 1
            _LOGGER.debug("No rule for %r, passing %r through", "".join(buffer), buffer[0])
            commits.append(Commit(output=(buffer[0],), keys=(buffer[0],), literal=True))

        tail = buffer[length:]
        self._buffer = []
        self._best = None
        for key in tail:
            self._step(key, commits)


def transliterate(
    text: str,
    table: RuleTable | None = None,
    escape: str | None = ESCAPE,
) -> str:
    """Run a whole string through a fresh Matcher and return the output text."""
    matcher = Matcher(table if table is not None else default_table(), escape=escape)
    parts = [c.text for c in matcher.feed_all(text)]
    last = matcher.flush()
    if last is not None:
        parts.append(last.text)
    return "".join(parts)
