"""
CEX Document.

Object API over the parser: holds the store of the most recent parse and
exposes the structured accessors as methods.
"""

from pathlib import Path
from typing import IO

from cexparser.config.models import CexConfig
from cexparser.loaders import fetch_text, read_text
from cexparser.parsing import accessors
from cexparser.parsing.diagnostics import Diagnostic
from cexparser.parsing.splitter import parse_cex
from cexparser.parsing.store import BlockStore


class CexDocument:
    """
    A parsed CEX document.

    Each call to `parse` (or one of the loaders) replaces the block store
    wholesale; stores returned earlier are left untouched.
    """
    def __init__(self, config: CexConfig | None = None):
        self.config = config or CexConfig()
        self.store = BlockStore()

    def parse(self, text: str) -> "CexDocument":
        self.store = parse_cex(text, self.config.parser)
        return self

    def load_from_url(self, url: str) -> "CexDocument":
        """Fetches and parses a document; see `loaders.fetch_text` for errors."""
        loader = self.config.loader
        text = fetch_text(
            url,
            timeout_s=loader.timeout_s,
            verify_ssl=loader.verify_ssl,
            encoding=loader.encoding,
        )
        return self.parse(text)

    def load_from_file(self, source: str | Path | IO) -> "CexDocument":
        """Reads and parses a document; see `loaders.read_text` for errors."""
        return self.parse(read_text(source, encoding=self.config.loader.encoding))

    def labels(self) -> tuple[str, ...]:
        return accessors.labels(self.store)

    def block_contents(self, label: str) -> tuple[str, ...]:
        return accessors.bodies(self.store, label)

    def delimited_data(self, label: str, include_header: bool = True) -> str:
        return accessors.concatenated_table(
            self.store, label, include_header, config=self.config.parser
        )

    def unique_column_values(
        self,
        value_column: str,
        label: str | None = None,
        key_column: str | None = None,
        key_value: str | None = None,
        diagnostics: list[Diagnostic] | None = None,
    ) -> tuple[str, ...]:
        return accessors.unique_column_values(
            self.store,
            value_column,
            label=label or self.config.accessors.datamodels_label,
            key_column=key_column,
            key_value=key_value,
            config=self.config.parser,
            diagnostics=diagnostics,
        )

    def collections_for_model(
        self,
        model: str,
        model_column: str | None = None,
        collection_column: str | None = None,
        diagnostics: list[Diagnostic] | None = None,
    ) -> tuple[str, ...]:
        """Collections listed for one model in the datamodels table."""
        names = self.config.accessors
        return self.unique_column_values(
            collection_column or names.collection_column,
            key_column=model_column or names.model_column,
            key_value=model,
            diagnostics=diagnostics,
        )

    def unique_models(
        self,
        model_column: str | None = None,
        diagnostics: list[Diagnostic] | None = None,
    ) -> tuple[str, ...]:
        """Every model named in the datamodels table."""
        return self.unique_column_values(
            model_column or self.config.accessors.model_column,
            diagnostics=diagnostics,
        )

    def relation_sets(
        self,
        include_header: bool = True,
        diagnostics: list[Diagnostic] | None = None,
    ) -> list[accessors.RelationSetRecord]:
        return accessors.relation_sets(
            self.store,
            include_header,
            label=self.config.accessors.relation_set_label,
            config=self.config.parser,
            diagnostics=diagnostics,
        )
