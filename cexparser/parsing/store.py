"""
Block store produced by a single parse.
"""

from collections.abc import Iterator, Mapping


class BlockStore(Mapping):
    """
    Ordered, read-only mapping from block label to its captured bodies.

    Labels keep the order in which they were first seen in the document and
    bodies keep their occurrence order. A label is only present when at least
    one non-empty body was captured for it.
    """

    def __init__(self, blocks: Mapping[str, list[str] | tuple[str, ...]] | None = None):
        self._blocks: dict[str, tuple[str, ...]] = {}
        for label, bodies in (blocks or {}).items():
            if bodies:
                self._blocks[label] = tuple(bodies)

    def __getitem__(self, label: str) -> tuple[str, ...]:
        return self._blocks[label]

    def __iter__(self) -> Iterator[str]:
        return iter(self._blocks)

    def __len__(self) -> int:
        return len(self._blocks)

    def __repr__(self) -> str:
        counts = ", ".join(f"{label}={len(bodies)}" for label, bodies in self._blocks.items())
        return f"BlockStore({counts})"

    def labels(self) -> tuple[str, ...]:
        """Return every label in first-seen order."""
        return tuple(self._blocks)

    def bodies(self, label: str) -> tuple[str, ...]:
        """Return the bodies stored under a label, or an empty tuple."""
        return self._blocks.get(label, ())

    def to_dict(self) -> dict[str, list[str]]:
        """Plain dictionary copy of the store."""
        return {label: list(bodies) for label, bodies in self._blocks.items()}
