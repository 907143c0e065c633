"""
CEX document loaders.

Fetches a document over HTTP or reads it from a local file and returns its
text. Parsing is left to the caller.
"""

import http.client
import ssl
import urllib.error
import urllib.request
from pathlib import Path
from typing import IO

from loguru import logger


class CexLoadError(Exception):
    """Base exception for document loading errors."""
    pass


class TransportFailure(CexLoadError):
    """
    The document could not be fetched.

    Attributes:
        status: HTTP status code, or None when no response was received.
        url: The requested URL.
    """
    def __init__(self, message: str, status: int | None = None, url: str = ""):
        super().__init__(message)
        self.status = status
        self.url = url


class ReadFailure(CexLoadError):
    """The document could not be read from a local file; the I/O error is chained."""
    pass


def is_url(source: str) -> bool:
    return source.lower().startswith(("http://", "https://"))


def fetch_text(
    url: str,
    timeout_s: int = 30,
    verify_ssl: bool = True,
    encoding: str = "utf-8",
) -> str:
    """
    Downloads a CEX document.

    Args:
        url: http(s) URL of the document.
        timeout_s: Socket timeout in seconds.
        verify_ssl: Verify server certificates.
        encoding: Text encoding of the response body.

    Returns:
        The document text.

    Raises:
        TransportFailure: On a non-2xx status or when the server is unreachable.
    """
    ssl_context = None
    if not verify_ssl:
        ssl_context = ssl._create_unverified_context()

    logger.debug(f"Fetching {url}")
    try:
        req = urllib.request.Request(url, headers={"Accept": "text/plain, */*"})
        with urllib.request.urlopen(req, timeout=timeout_s, context=ssl_context) as response:
            status = getattr(response, "status", 200)
            if not 200 <= status < 300:
                raise TransportFailure(f"HTTP error! status: {status} for URL: {url}", status, url)
            raw = response.read()
    except urllib.error.HTTPError as e:
        raise TransportFailure(f"HTTP error! status: {e.code} for URL: {url}", e.code, url) from e
    except urllib.error.URLError as e:
        raise TransportFailure(f"Connection failed: {e.reason} for URL: {url}", None, url) from e
    except TimeoutError as e:
        raise TransportFailure(f"Timed out after {timeout_s}s for URL: {url}", None, url) from e
    except (OSError, http.client.HTTPException) as e:
        raise TransportFailure(f"Connection lost: {e!r} for URL: {url}", None, url) from e

    text = raw.decode(encoding, errors="replace")
    if not text.strip():
        logger.warning(f"Received empty document from {url}")
    return text


def read_text(source: str | Path | IO, encoding: str = "utf-8") -> str:
    """
    Reads a CEX document from a path or an open file handle.

    Binary handles are decoded with `encoding`.

    Raises:
        ReadFailure: If the file cannot be opened, read or decoded.
    """
    try:
        if isinstance(source, (str, Path)):
            path = Path(source)
            logger.debug(f"Reading {path}")
            return path.read_text(encoding=encoding)
        content = source.read()
        if isinstance(content, bytes):
            content = content.decode(encoding)
        return content
    except (OSError, UnicodeDecodeError) as e:
        raise ReadFailure(f"Could not read {source}: {e}") from e
