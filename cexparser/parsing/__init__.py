"""
CEX parsing submodule.
"""

from .splitter import BlockSplitter, parse_cex
from .store import BlockStore
from .accessors import (
    RelationSetRecord,
    bodies,
    concatenated_table,
    labels,
    relation_sets,
    unique_column_values,
)
from .diagnostics import Diagnostic

__all__ = [
    "BlockSplitter",
    "BlockStore",
    "Diagnostic",
    "RelationSetRecord",
    "bodies",
    "concatenated_table",
    "labels",
    "parse_cex",
    "relation_sets",
    "unique_column_values",
]
