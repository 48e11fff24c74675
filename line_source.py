#!/usr/bin/env python3
import sys
from pathlib import Path
from typing import Callable, Iterator, Optional


def count_lines(path, progress_step=1_000_000) -> int:
    """
    Full pass over the file, only to size the progress bar.
    A trailing line without '\\n' still counts.
    """
    path = Path(path)
    total = 0
    with path.open("r", encoding="utf-8", newline="\n") as f:
        for _ in f:
            total += 1
            if progress_step and total % progress_step == 0:
                print(f"[count] {total:,}...", file=sys.stderr)
    print(f"[count] total lines = {total:,}", file=sys.stderr)
    return total


def iter_lines(path) -> Iterator[str]:
    """Yield lines in file order without their '\\n' / '\\r\\n' terminator."""
    path = Path(path)
    with path.open("r", encoding="utf-8", newline="\n") as f:
        for line in f:
            if line.endswith("\n"):
                line = line[:-1]
                if line.endswith("\r"):
                    line = line[:-1]
            yield line


def produce(path, sink: Callable[[str], None], progress: Optional[object] = None) -> int:
    """
    Second pass: hand every line to `sink` (one call per line).
    Read/decode errors propagate; whatever was already sent stays sent.
    """
    produced = 0
    for line in iter_lines(path):
        sink(line)
        produced += 1
        if progress is not None:
            progress.update(1)
    return produced
