"""In-memory counter state for the even server.

The counter lives for the process lifetime only; nothing is persisted.
Its parity alone decides which record variant ``/info`` returns.
"""

from __future__ import annotations

import logging
from threading import RLock

from .records import Record, build_record


log = logging.getLogger("even_server.state")

DEFAULT_INITIAL_COUNT = 2


class CounterStore:
    """Thread-safe parity counter."""

    def __init__(self, initial: int = DEFAULT_INITIAL_COUNT) -> None:
        self._lock = RLock()
        self._value = initial

    @property
    def value(self) -> int:
        return self._value

    def advance(self) -> tuple[Record, int]:
        """Pick the record for the current parity, then flip the parity.

        Even: base record, counter goes down. Odd: extended record, counter goes up.
        Read, decide and mutate happen under one lock acquisition; the counter
        value after the mutation is returned alongside the record.
        """

        with self._lock:
            extended = self._value % 2 != 0
            if extended:
                self._value += 1
            else:
                self._value -= 1
            record = build_record(extended)
            log.debug("parity flip -> %s (counter now %d)", record.kind, self._value)
            return record, self._value

