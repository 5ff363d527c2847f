from rich.console import Console

from cronfields.cron_parse import parse_cron
from cronfields.render import build_table, format_lines, format_schedule


class TestFormatSchedule:
    def test_steps(self):
        parsed = parse_cron("*/15 */3 */10 */2 */1 /path/command")
        assert format_schedule(parsed) == "\n".join(
            [
                "minute         0 15 30 45",
                "hour           0 3 6 9 12 15 18 21",
                "day of month   1 11 21 31",
                "month          1 3 5 7 9 11",
                "day of week    0 1 2 3 4 5 6",
                "command        /path/command",
            ]
        )

    def test_numbers(self):
        parsed = parse_cron("1 3 8 12 2 /path/command")
        assert format_lines(parsed) == [
            "minute         1",
            "hour           3",
            "day of month   8",
            "month          12",
            "day of week    2",
            "command        /path/command",
        ]

    def test_name_truncated_to_width(self):
        parsed = parse_cron("1 3 8 12 2 cmd")
        lines = format_lines(parsed, width=4)
        assert lines[2] == "day 8"
        assert lines[0] == "minu1"


class TestBuildTable:
    def test_rows(self):
        parsed = parse_cron("5 * 1,15 */6 1-5 /bin/[x]")
        table = build_table(parsed)
        assert table.row_count == 6

        console = Console(width=200, record=True)
        console.print(table)
        text = console.export_text()
        assert "day of month" in text
        assert "1 15" in text
        assert "/bin/[x]" in text
        assert "range" in text
