from frequency_table import FrequencyTable
from report import ReportRow, build_report, write_csv


def test_build_report_sorts_by_count_then_line():
    rows = build_report({"b": 2, "a": 3, "d": 2, "c": 2, "z": 1})
    assert rows == [
        ReportRow("a", 3),
        ReportRow("b", 2),
        ReportRow("c", 2),
        ReportRow("d", 2),
        ReportRow("z", 1),
    ]


def test_build_report_from_table():
    table = FrequencyTable()
    for line in ["a", "b", "a", "a", "b"]:
        table.increment(line)
    assert build_report(table) == [("a", 3), ("b", 2)]


def test_write_csv_header_and_rows(tmp_path):
    out = tmp_path / "result.csv"
    n = write_csv(out, [ReportRow("a", 3), ReportRow("x,y", 2)])
    assert n == 2
    # commas inside a line are written as-is
    assert out.read_text(encoding="utf-8") == "Line,Count\na,3\nx,y,2\n"


def test_write_csv_empty_report_is_header_only(tmp_path):
    out = tmp_path / "result.csv"
    assert write_csv(out, []) == 0
    assert out.read_text(encoding="utf-8") == "Line,Count\n"


def test_write_csv_truncates_previous_output(tmp_path):
    out = tmp_path / "result.csv"
    out.write_text("Line,Count\nstale,99\nold,42\n", encoding="utf-8")
    write_csv(out, [ReportRow("fresh", 1)])
    assert out.read_text(encoding="utf-8") == "Line,Count\nfresh,1\n"
