# ABOUTME: Core data structures for the filename/metadata parsing engine.
# ABOUTME: ParseResult is the bibliographic identity handed back to the scan orchestrator.

from dataclasses import dataclass
from enum import Enum

# Reserved token meaning "this file is not part of a numbered volume".
LOOSE_LEAF_VOLUME = "-100000"
# Reserved token meaning "no chapter number" (default or special placement).
DEFAULT_CHAPTER = "-100000"


class LibraryType(Enum):
    """Cataloging convention a library follows. Changes which token rules apply."""

    MANGA = "manga"
    COMIC = "comic"
    BOOK = "book"
    LIGHT_NOVEL = "lightnovel"
    IMAGE = "image"
    COMIC_LEGACY = "comiclegacy"

    @property
    def is_comic(self) -> bool:
        return self in (LibraryType.COMIC, LibraryType.COMIC_LEGACY)


class ContentFormat(Enum):
    """Coarse content format, resolved from the file extension."""

    ARCHIVE = "archive"
    EPUB = "epub"
    PDF = "pdf"
    IMAGE = "image"


@dataclass(frozen=True)
class EmbeddedMetadata:
    """A ComicInfo-style sidecar record, pre-parsed by a collaborator.

    Empty strings mean "not set". Only ``series``, ``volume`` and ``number``
    take part in override decisions; the rest is carried for callers.
    """

    series: str = ""
    volume: str = ""
    number: str = ""
    title: str = ""
    localized_series: str = ""
    title_sort: str = ""
    summary: str = ""

    @property
    def has_series(self) -> bool:
        return bool(self.series.strip())

    @property
    def has_volume(self) -> bool:
        return bool(self.volume.strip())

    @property
    def has_number(self) -> bool:
        return bool(self.number.strip())


@dataclass(frozen=True)
class ParseResult:
    """The parsed bibliographic identity of one file.

    Volume and chapter tokens are normalized strings ("1", "2.5", "1-3").
    Absence is always expressed with LOOSE_LEAF_VOLUME / DEFAULT_CHAPTER,
    never with an empty string. A result with an empty series is not usable
    and is never returned by a parser.
    """

    full_path: str
    filename: str
    title: str
    series: str = ""
    volumes: str = LOOSE_LEAF_VOLUME
    chapters: str = DEFAULT_CHAPTER
    format: ContentFormat = ContentFormat.ARCHIVE
    is_special: bool = False
    edition: str = ""
    series_sort: str = ""
    special_index: int = 0
    embedded_metadata: EmbeddedMetadata | None = None

    @property
    def is_valid(self) -> bool:
        """Whether the result carries enough identity to be cataloged."""
        return bool(self.series)
