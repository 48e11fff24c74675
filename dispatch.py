#!/usr/bin/env python3
import sys
from concurrent.futures import ThreadPoolExecutor
from queue import Queue
from typing import Optional

from frequency_table import SENTINEL, FrequencyTable, count_worker
from line_source import produce


DEFAULT_CONCURRENCY = 5


def count_concurrently(path, concurrency: int = DEFAULT_CONCURRENCY,
                       progress: Optional[object] = None) -> FrequencyTable:
    """
    One producer (this thread) reads `path` into an unbounded queue,
    `concurrency` workers pop from it and count into a shared table.

    Every worker is joined before the table is returned. If the producer
    fails the workers are still shut down and joined, then the error is
    re-raised; a failing worker re-raises from `future.result()`.
    """
    if concurrency < 1:
        raise ValueError(f"concurrency must be >= 1, got {concurrency}")

    table = FrequencyTable()
    channel: Queue = Queue()

    with ThreadPoolExecutor(max_workers=concurrency) as ex:
        futures = [ex.submit(count_worker, channel, table) for _ in range(concurrency)]

        try:
            produced = produce(path, channel.put, progress=progress)
        finally:
            # close the channel: each worker drains, then eats one sentinel
            for _ in range(concurrency):
                channel.put(SENTINEL)

        per_worker = [fut.result() for fut in futures]

    print(f"[info] produced {produced:,} lines, counted {sum(per_worker):,} "
          f"({', '.join(f'{n:,}' for n in per_worker)} per worker)", file=sys.stderr)
    return table
