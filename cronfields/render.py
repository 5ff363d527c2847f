"""Text and table rendering of a parsed cron expression."""

from rich.markup import escape
from rich.table import Table

from cronfields.config import NAME_COLUMN_WIDTH
from cronfields.cron_parse import ParsedCron


def _pad_name(name: str, width: int) -> str:
    return name[:width].ljust(width)


def format_lines(parsed: ParsedCron, width: int = NAME_COLUMN_WIDTH) -> list[str]:
    return [_pad_name(field.name, width) + " ".join(field.values) for _, field in parsed]


def format_schedule(parsed: ParsedCron, width: int = NAME_COLUMN_WIDTH) -> str:
    return "\n".join(format_lines(parsed, width))


def build_table(parsed: ParsedCron) -> Table:
    table = Table()
    table.add_column("Field", style="cyan")
    table.add_column("Syntax", style="dim")
    table.add_column("Values")

    for _, field in parsed:
        syntax = field.syntax.value if field.syntax else "-"
        table.add_row(field.name, syntax, escape(" ".join(field.values)))

    return table
