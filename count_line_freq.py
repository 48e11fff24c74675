#!/usr/bin/env python3
import argparse
import os
import sys

from dotenv import load_dotenv
from tqdm import tqdm

from dispatch import DEFAULT_CONCURRENCY, count_concurrently
from line_source import count_lines
from report import build_report, write_csv


__version__ = "0.1.0"

DEFAULT_FILE_PATH = "JXJ.txt"
DEFAULT_RESULT_PATH = "result.csv"


def env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    try:
        return int(value)
    except ValueError:
        print(f"[ERROR] {name} must be an integer, got {value!r}", file=sys.stderr)
        sys.exit(1)


def positive_int(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {n}")
    return n


def non_negative_int(value: str) -> int:
    n = int(value)
    if n < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {n}")
    return n


def build_parser() -> argparse.ArgumentParser:
    # .env / environment only change the defaults, explicit flags win
    parser = argparse.ArgumentParser(
        prog="line-freq",
        description=(
            "Count how many times each distinct line occurs in a text file "
            "and write Line,Count rows sorted by count (descending) to CSV."
        ),
    )
    parser.add_argument(
        "-f", "--file-path",
        default=os.getenv("LINE_FREQ_FILE_PATH", DEFAULT_FILE_PATH),
        help=f"Input text file, one record per line. Default: {DEFAULT_FILE_PATH}.",
    )
    parser.add_argument(
        "-r", "--result-path",
        default=os.getenv("LINE_FREQ_RESULT_PATH", DEFAULT_RESULT_PATH),
        help=f"Output CSV file (overwritten). Default: {DEFAULT_RESULT_PATH}.",
    )
    parser.add_argument(
        "-c", "--concurrency",
        type=positive_int,
        default=None,
        help=f"Number of counting threads. Default: $LINE_FREQ_CONCURRENCY or {DEFAULT_CONCURRENCY}.",
    )
    parser.add_argument(
        "--progress-interval",
        type=non_negative_int,
        default=1_000_000,
        help="Print a [count] line every N lines of the first pass (0 = off).",
    )
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Do not draw progress bars.",
    )
    parser.add_argument(
        "-V", "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def main(argv=None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    if args.concurrency is None:
        args.concurrency = env_int("LINE_FREQ_CONCURRENCY", DEFAULT_CONCURRENCY)

    if args.concurrency < 1:
        print(f"[ERROR] concurrency must be >= 1, got {args.concurrency}", file=sys.stderr)
        sys.exit(1)

    print(f"[info] counting lines of {args.file_path}", file=sys.stderr)
    try:
        total_lines = count_lines(args.file_path, progress_step=args.progress_interval)
    except FileNotFoundError:
        print(f"[ERROR] input file not found: {args.file_path}", file=sys.stderr)
        sys.exit(1)
    except (OSError, UnicodeDecodeError) as e:
        print(f"[ERROR] reading {args.file_path}: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"[info] using {args.concurrency} workers", file=sys.stderr)
    with tqdm(total=total_lines, desc="counting", unit="line",
              disable=args.no_progress) as bar:
        try:
            table = count_concurrently(args.file_path, args.concurrency, progress=bar)
        except (OSError, UnicodeDecodeError) as e:
            print(f"\n[ERROR] reading {args.file_path}: {e}", file=sys.stderr)
            sys.exit(1)

    rows = build_report(table)
    counted = sum(r.count for r in rows)
    print(f"[info] total lines counted: {counted:,}", file=sys.stderr)
    print(f"[info] distinct lines: {len(rows):,}", file=sys.stderr)

    with tqdm(total=len(rows), desc="writing", unit="row",
              disable=args.no_progress) as bar:
        try:
            written = write_csv(args.result_path, rows, progress=bar)
        except OSError as e:
            print(f"\n[ERROR] writing {args.result_path}: {e}", file=sys.stderr)
            sys.exit(1)

    print(f"[done] written {written:,} rows to {args.result_path}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
