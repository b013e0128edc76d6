# ABOUTME: EPUB internal-metadata extraction using ebooklib.
# ABOUTME: Turns calibre/EPUB 3 series information into a ParseResult for BookParser.

import logging
from pathlib import Path

from ebooklib import epub

from shelfparse.core.filesystem import FileSystem, LocalFileSystem
from shelfparse.parsing.paths import normalize_path, remove_extension_if_supported
from shelfparse.parsing.tokens import format_value
from shelfparse.parsing.types import (
    DEFAULT_CHAPTER,
    LOOSE_LEAF_VOLUME,
    ContentFormat,
    ParseResult,
)

logger = logging.getLogger(__name__)


class EpubReadError(Exception):
    """Raised when an EPUB file cannot be read or parsed."""


def open_epub(path: Path) -> epub.EpubBook:
    """Open an EPUB with ebooklib, wrapping every failure in EpubReadError."""
    if not path.exists():
        raise EpubReadError(f"File not found: {path}")
    try:
        return epub.read_epub(str(path), options={"ignore_ncx": True})
    except Exception as exc:
        raise EpubReadError(f"Failed to read EPUB: {path}: {exc}") from exc


def _get_metadata_value(book: epub.EpubBook, namespace: str, name: str) -> str:
    """First value of a metadata field, or "" if missing."""
    values = book.get_metadata(namespace, name)
    if not values:
        return ""
    # Metadata entries are tuples of (value, attributes)
    value = values[0][0]
    return str(value).strip() if value else ""


def _find_meta(book: epub.EpubBook, key: str) -> str:
    """Look up a ``<meta>`` element by its ``name`` or ``property`` attribute.

    ebooklib files ``<meta name="calibre:series">`` under a "calibre"
    namespace and EPUB 3 ``<meta property=...>`` under the OPF namespace, so
    every namespace is searched. ``name`` metas carry their value in
    ``content``; ``property`` metas carry it as element text.
    """
    for entries in book.metadata.values():
        for values in entries.values():
            for value, attrs in values:
                if attrs.get("name") == key:
                    return (attrs.get("content") or "").strip()
                if attrs.get("property") == key:
                    return str(value or "").strip()
    return ""


def _format_series_index(index: str) -> str:
    """Calibre writes indexes as floats: ``"2.0"`` -> ``"2"``, ``"1.5"`` stays."""
    try:
        number = float(index)
    except ValueError:
        return format_value(index)
    if number.is_integer():
        return str(int(number))
    return str(number)


class EpubMetadataExtractor:
    """Builds a ParseResult from the series information inside an EPUB.

    Args:
        fs: File-system abstraction used to check that the file exists.
    """

    def __init__(self, fs: FileSystem | None = None) -> None:
        self._fs = fs or LocalFileSystem()

    def parse_info(self, file_path: str) -> ParseResult | None:
        """Read series/volume/title from the EPUB's OPF metadata.

        Returns None (and logs a warning) when the file cannot be read.
        """
        if not self._fs.exists(file_path):
            logger.warning("EPUB not found: %s", file_path)
            return None
        try:
            book = open_epub(Path(file_path))
        except EpubReadError as exc:
            logger.warning("%s", exc)
            return None

        full_path = normalize_path(file_path)
        filename = self._fs.file_name(file_path)
        title = _get_metadata_value(book, "DC", "title") or remove_extension_if_supported(
            filename
        )

        series = _find_meta(book, "calibre:series") or _find_meta(
            book, "belongs-to-collection"
        )
        index = _find_meta(book, "calibre:series_index") or _find_meta(
            book, "group-position"
        )

        if series and index:
            return ParseResult(
                full_path=full_path,
                filename=filename,
                title=_find_meta(book, "calibre:title_sort") or title,
                series=series,
                series_sort=series,
                volumes=_format_series_index(index),
                chapters=DEFAULT_CHAPTER,
                format=ContentFormat.EPUB,
            )

        return ParseResult(
            full_path=full_path,
            filename=filename,
            title=title,
            series=title,
            volumes=LOOSE_LEAF_VOLUME,
            chapters=DEFAULT_CHAPTER,
            format=ContentFormat.EPUB,
        )
