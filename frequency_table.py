#!/usr/bin/env python3
import threading
from collections import Counter
from queue import Queue
from typing import Dict


# end-of-stream marker, one per worker
SENTINEL = None


class FrequencyTable:
    """line -> count, shared by all counting workers behind one lock."""

    def __init__(self):
        self._counts: Counter = Counter()
        self._lock = threading.Lock()

    def increment(self, line: str) -> None:
        # lookup + insert/add must be one step, otherwise updates get lost
        with self._lock:
            self._counts[line] += 1

    def snapshot(self) -> Dict[str, int]:
        with self._lock:
            return dict(self._counts)

    def total(self) -> int:
        with self._lock:
            return sum(self._counts.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._counts)


def count_worker(channel: Queue, table: FrequencyTable) -> int:
    """
    Pop lines from the shared channel until the sentinel arrives.
    Returns how many lines this worker counted.
    """
    counted = 0
    while True:
        line = channel.get()
        if line is SENTINEL:
            break
        table.increment(line)
        counted += 1
    return counted
