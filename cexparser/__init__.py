"""
CEX block-structured text parser.
"""

from loguru import logger

from .document import CexDocument
from .loaders import CexLoadError, ReadFailure, TransportFailure
from .parsing import (
    BlockStore,
    Diagnostic,
    RelationSetRecord,
    bodies,
    concatenated_table,
    labels,
    parse_cex,
    relation_sets,
    unique_column_values,
)

# Silent unless the application enables it (see main.setup_logging)
logger.disable("cexparser")

__version__ = "1.0.0"

__all__ = [
    "BlockStore",
    "CexDocument",
    "CexLoadError",
    "Diagnostic",
    "ReadFailure",
    "RelationSetRecord",
    "TransportFailure",
    "bodies",
    "concatenated_table",
    "labels",
    "parse_cex",
    "relation_sets",
    "unique_column_values",
]
