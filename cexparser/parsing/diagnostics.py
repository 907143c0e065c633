"""
Warnings about malformed blocks.
"""

from dataclasses import dataclass

from loguru import logger

from cexparser.constants import DIAGNOSTIC_PREVIEW_CHARS


@dataclass(frozen=True)
class Diagnostic:
    """A skipped block occurrence and the reason it was skipped."""
    label: str
    message: str
    index: int | None = None


def preview(body: str, limit: int = DIAGNOSTIC_PREVIEW_CHARS) -> str:
    """Shortened body text for log messages."""
    if len(body) <= limit:
        return body
    return body[:limit] + "..."


def report(
    diagnostics: list[Diagnostic] | None,
    label: str,
    message: str,
    index: int | None = None,
) -> None:
    """
    Logs a warning and appends it to the caller's diagnostics list, if any.
    """
    where = f"{label}[{index}]" if index is not None else label
    logger.warning(f"{where}: {message}")
    if diagnostics is not None:
        diagnostics.append(Diagnostic(label=label, message=message, index=index))
