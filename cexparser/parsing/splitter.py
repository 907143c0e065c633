"""
Block Splitter Class.

Single forward pass over a CEX document that groups body lines under the
label of the most recent `#!` marker.
"""

from loguru import logger

from cexparser.config.models import ParserConfig
from .store import BlockStore


def normalize_line_endings(text: str) -> str:
    """Convert CRLF and lone CR line endings to LF."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


class BlockSplitter:
    """
    State machine that partitions CEX text into labeled blocks.

    Blank lines and comment lines are dropped before any other decision.
    Marker lines close the open block and open a new one; every other line is
    kept verbatim when a block is open and discarded otherwise.
    """
    def __init__(self, config: ParserConfig | None = None):
        """
        Initializes the splitter.

        Args:
            config: Marker settings; the standard CEX markers when omitted.
        """
        self.config = config or ParserConfig()

        # Output
        self.blocks: dict[str, list[str]] = {}

        # Internal state
        self.current_label: str | None = None
        self.current_lines: list[str] = []

    def reset(self) -> None:
        """Discards everything captured by a previous run."""
        self.blocks = {}
        self.current_label = None
        self.current_lines = []

    def is_skipped(self, stripped: str) -> bool:
        """True for blank lines and comment lines."""
        return not stripped or stripped.startswith(self.config.comment_marker)

    def is_marker(self, stripped: str) -> bool:
        return stripped.startswith(self.config.block_marker)

    def flush(self) -> None:
        """
        Stores the open block if it captured any line.

        An open block without lines (a marker directly followed by another
        marker) leaves no trace in the output.
        """
        if self.current_label and self.current_lines:
            self.blocks.setdefault(self.current_label, []).append("\n".join(self.current_lines))
        elif self.current_label:
            logger.debug(f"Dropping empty block '{self.current_label}'")
        self.current_lines = []

    def open_block(self, stripped: str) -> None:
        self.flush()
        label = stripped[len(self.config.block_marker):].strip()
        self.current_label = label or None
        if not label:
            logger.debug("Ignoring marker line without a label")

    def feed(self, raw_line: str) -> None:
        """Processes a single line of input."""
        stripped = raw_line.strip()
        if self.is_skipped(stripped):
            return
        if self.is_marker(stripped):
            self.open_block(stripped)
        elif self.current_label:
            self.current_lines.append(raw_line)

    def parse(self, text: str) -> BlockStore:
        """
        Splits a whole document into blocks.

        Args:
            text: Raw CEX document.

        Returns:
            A new BlockStore; state from earlier calls is discarded first.
        """
        self.reset()
        for raw_line in normalize_line_endings(text).split("\n"):
            self.feed(raw_line)
        self.flush()

        store = BlockStore(self.blocks)
        logger.debug(
            f"Parsed {sum(len(b) for b in store.values())} blocks under {len(store)} labels"
        )
        return store


def parse_cex(text: str, config: ParserConfig | None = None) -> BlockStore:
    """
    Parse a CEX document into a BlockStore using BlockSplitter.

    Never raises on content: text without markers yields an empty store.
    """
    return BlockSplitter(config).parse(text)
