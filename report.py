#!/usr/bin/env python3
from pathlib import Path
from typing import Iterable, List, Mapping, NamedTuple, Optional, Union

from frequency_table import FrequencyTable


HEADER = "Line,Count"


class ReportRow(NamedTuple):
    line: str
    count: int


def build_report(table: Union[FrequencyTable, Mapping[str, int]]) -> List[ReportRow]:
    """
    Rows sorted by count descending.
    Equal counts are ordered by the line itself (code-point order), so the
    report does not depend on which worker saw a line first.
    """
    counts = table.snapshot() if isinstance(table, FrequencyTable) else table
    rows = [ReportRow(line, count) for line, count in counts.items()]
    rows.sort(key=lambda r: (-r.count, r.line))
    return rows


def write_csv(path, rows: Iterable[ReportRow], progress: Optional[object] = None) -> int:
    """
    Truncate `path` and write `Line,Count` + one `<line>,<count>` per row.

    Lines are written verbatim: a line containing a comma is NOT quoted,
    so such rows will not round-trip through a CSV reader.
    On a write error the file may be left partial.
    """
    path = Path(path)
    written = 0
    with path.open("w", encoding="utf-8", newline="") as fout:
        fout.write(HEADER + "\n")
        for line, count in rows:
            fout.write(f"{line},{count}\n")
            written += 1
            if progress is not None:
                progress.update(1)
    return written
