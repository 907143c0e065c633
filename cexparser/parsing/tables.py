"""
Table view helpers for pipe-delimited block bodies.
"""

from dataclasses import dataclass, field

from cexparser.config.models import ParserConfig


@dataclass
class TableView:
    """
    Header/rows interpretation of a block body.

    Attributes:
        header: Column names, trimmed.
        rows: Data rows, each a list of trimmed cell values.
        lines: The trimmed content lines the view was built from.
    """
    header: list[str] = field(default_factory=list)
    rows: list[list[str]] = field(default_factory=list)
    lines: list[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.lines

    def column_index(self, name: str) -> int | None:
        """Exact, case-sensitive lookup of a column position."""
        try:
            return self.header.index(name)
        except ValueError:
            return None


def content_lines(body: str, config: ParserConfig | None = None) -> list[str]:
    """
    Returns the trimmed lines of a body, without blank or comment lines.
    """
    comment_marker = (config or ParserConfig()).comment_marker
    lines = []
    for raw_line in body.split("\n"):
        stripped = raw_line.strip()
        if not stripped or stripped.startswith(comment_marker):
            continue
        lines.append(stripped)
    return lines


def split_row(line: str, config: ParserConfig | None = None) -> list[str]:
    """Splits one pipe-delimited line into trimmed cells."""
    delimiter = (config or ParserConfig()).delimiter
    return [cell.strip() for cell in line.split(delimiter)]


def table_view(body: str, config: ParserConfig | None = None) -> TableView:
    """
    Builds a TableView: first content line is the header, the rest are rows.
    """
    lines = content_lines(body, config)
    if not lines:
        return TableView()
    return TableView(
        header=split_row(lines[0], config),
        rows=[split_row(line, config) for line in lines[1:]],
        lines=lines,
    )
