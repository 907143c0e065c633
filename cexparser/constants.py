"""
Global constants used across the CEX parser.
"""

# Line markers
BLOCK_MARKER = "#!"
"""Prefix of a trimmed line that opens a new block; the remainder is its label"""

COMMENT_MARKER = "//"
"""Prefix of a trimmed line that is ignored everywhere"""

CELL_DELIMITER = "|"
"""Separator between header names and cell values inside tabular blocks"""

# Reserved labels
DATAMODELS_LABEL = "datamodels"
RELATION_SET_LABEL = "citerelationset"

# Default column names of the datamodels table
MODEL_COLUMN = "Model"
COLLECTION_COLUMN = "Collection"

# Relation set record prefixes (matched case-insensitively)
URN_PREFIX = "urn|"
LABEL_PREFIX = "label|"

RELATION_SET_MIN_LINES = 3
"""urn line, label line and data header"""

DIAGNOSTIC_PREVIEW_CHARS = 150
"""Length of body text quoted in warnings about malformed blocks"""
