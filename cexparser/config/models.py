"""
Pydantic models for configuration validation.
"""

from pydantic import BaseModel, Field, field_validator

from cexparser.constants import (
    BLOCK_MARKER,
    CELL_DELIMITER,
    COLLECTION_COLUMN,
    COMMENT_MARKER,
    DATAMODELS_LABEL,
    MODEL_COLUMN,
    RELATION_SET_LABEL,
)


class ParserConfig(BaseModel):
    """Line markers recognised by the block splitter and table readers."""
    block_marker: str = BLOCK_MARKER
    comment_marker: str = COMMENT_MARKER
    delimiter: str = CELL_DELIMITER

    @field_validator("block_marker", "comment_marker", "delimiter")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("markers must contain at least one non-whitespace character")
        return value


class AccessorConfig(BaseModel):
    """Reserved labels and default column names used by the structured accessors."""
    datamodels_label: str = DATAMODELS_LABEL
    relation_set_label: str = RELATION_SET_LABEL
    model_column: str = MODEL_COLUMN
    collection_column: str = COLLECTION_COLUMN


class LoaderConfig(BaseModel):
    """Settings for fetching and reading CEX documents."""
    timeout_s: int = Field(default=30, gt=0)
    verify_ssl: bool = True
    encoding: str = "utf-8"


class CexConfig(BaseModel):
    """
    Main configuration model for the application.
    Validates input from defaults.toml.
    """
    parser: ParserConfig = Field(default_factory=ParserConfig)
    accessors: AccessorConfig = Field(default_factory=AccessorConfig)
    loader: LoaderConfig = Field(default_factory=LoaderConfig)
