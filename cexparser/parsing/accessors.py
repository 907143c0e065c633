"""
Structured, read-only queries over a BlockStore.

Every function recomputes its view from the stored bodies on each call.
Malformed block occurrences are skipped and reported through
`diagnostics.report`; none of these functions raise on bad content.
"""

from dataclasses import asdict, dataclass

from cexparser.config.models import ParserConfig
from cexparser.constants import (
    DATAMODELS_LABEL,
    LABEL_PREFIX,
    RELATION_SET_LABEL,
    RELATION_SET_MIN_LINES,
    URN_PREFIX,
)
from .diagnostics import Diagnostic, preview, report
from .store import BlockStore
from .tables import content_lines, table_view


@dataclass(frozen=True)
class RelationSetRecord:
    """One parsed `citerelationset` block."""
    urn: str
    label: str
    data: str

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


def bodies(store: BlockStore, label: str) -> tuple[str, ...]:
    """Bodies stored under a label; empty when the label is absent."""
    return store.bodies(label)


def labels(store: BlockStore) -> tuple[str, ...]:
    """Every label in the order it was first seen."""
    return store.labels()


def concatenated_table(
    store: BlockStore,
    label: str,
    include_header: bool = True,
    config: ParserConfig | None = None,
) -> str:
    """
    Concatenates the tables of every body under a label.

    The first content line of the first non-empty body is the header and is
    emitted once when `include_header` is set. The remaining lines of every
    body follow in body order. Headers of later bodies are dropped without
    being compared to the first one.

    Args:
        store: Parsed blocks.
        label: Block label to read.
        include_header: Prepend the single header line.
        config: Marker settings.

    Returns:
        Newline-joined lines, or an empty string if nothing qualifies.
    """
    result_lines: list[str] = []
    header_added = False

    for body in store.bodies(label):
        lines = content_lines(body, config)
        if not lines:
            continue
        if include_header and not header_added:
            result_lines.append(lines[0])
            header_added = True
        result_lines.extend(lines[1:])

    return "\n".join(result_lines)


def unique_column_values(
    store: BlockStore,
    value_column: str,
    label: str = DATAMODELS_LABEL,
    key_column: str | None = None,
    key_value: str | None = None,
    config: ParserConfig | None = None,
    diagnostics: list[Diagnostic] | None = None,
) -> tuple[str, ...]:
    """
    Collects the distinct values of one column across every body of a label.

    Column names are matched exactly (case-sensitive). When `key_column` and
    `key_value` are given, only rows whose key cell equals `key_value` count.
    Bodies lacking a required column contribute nothing; rows with too few
    cells are skipped.

    Returns:
        Distinct values in ascending order.

    Raises:
        ValueError: If only one of `key_column` / `key_value` is given.
    """
    if (key_column is None) != (key_value is None):
        raise ValueError("key_column and key_value must be given together")

    values: set[str] = set()
    for index, body in enumerate(store.bodies(label)):
        view = table_view(body, config)
        if view.is_empty:
            continue

        value_idx = view.column_index(value_column)
        if value_idx is None:
            report(diagnostics, label, f"column '{value_column}' not in header {view.header}", index)
            continue

        key_idx = None
        if key_column is not None:
            key_idx = view.column_index(key_column)
            if key_idx is None:
                report(diagnostics, label, f"column '{key_column}' not in header {view.header}", index)
                continue

        min_cells = max(value_idx, key_idx if key_idx is not None else -1) + 1
        for row in view.rows:
            if len(row) < min_cells:
                continue
            if key_idx is not None and row[key_idx] != key_value:
                continue
            values.add(row[value_idx])

    return tuple(sorted(values))


def _strip_prefix(line: str, prefix: str) -> str | None:
    """Case-insensitive prefix match; returns the trimmed remainder or None."""
    if not line.lower().startswith(prefix.lower()):
        return None
    return line[len(prefix):].strip()


def relation_sets(
    store: BlockStore,
    include_header: bool = True,
    label: str = RELATION_SET_LABEL,
    config: ParserConfig | None = None,
    diagnostics: list[Diagnostic] | None = None,
) -> list[RelationSetRecord]:
    """
    Extracts the records of every relation set block.

    Each block is expected to hold:
    1. URN line: "urn|<value>"
    2. Label line: "label|<value>"
    3. Header line of the data table
    4. Data lines

    Blocks that do not match this layout are skipped individually.

    Args:
        store: Parsed blocks.
        include_header: Keep the data header line in each record's data.
        label: Block label holding relation sets.
        config: Marker settings.
        diagnostics: Optional list receiving one entry per skipped block.
    """
    records: list[RelationSetRecord] = []

    for index, body in enumerate(store.bodies(label)):
        lines = content_lines(body, config)
        if len(lines) < RELATION_SET_MIN_LINES:
            report(
                diagnostics, label,
                f"not enough lines for urn, label and data header: {preview(body)!r}",
                index,
            )
            continue

        urn = _strip_prefix(lines[0], URN_PREFIX)
        if urn is None:
            report(diagnostics, label, f"expected '{URN_PREFIX}...', found {lines[0]!r}", index)
            continue

        record_label = _strip_prefix(lines[1], LABEL_PREFIX)
        if record_label is None:
            report(diagnostics, label, f"expected '{LABEL_PREFIX}...', found {lines[1]!r}", index)
            continue

        data_header = lines[2]
        data_lines = lines[3:]
        if include_header:
            data = "\n".join([data_header, *data_lines])
        else:
            data = "\n".join(data_lines)

        records.append(RelationSetRecord(urn=urn, label=record_label, data=data))

    return records
