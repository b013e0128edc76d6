# ABOUTME: Filename/metadata parsing engine for library scans.
# ABOUTME: Exports the strategies, the merge reducer, and the ParseResult data model.

from shelfparse.parsing.basic import BasicParser
from shelfparse.parsing.book import BookParser
from shelfparse.parsing.merge import merge
from shelfparse.parsing.strategy import BookMetadataExtractor, ParsingStrategy
from shelfparse.parsing.tokens import is_loose_leaf, parse_chapter, parse_series, parse_volume
from shelfparse.parsing.types import (
    DEFAULT_CHAPTER,
    LOOSE_LEAF_VOLUME,
    ContentFormat,
    EmbeddedMetadata,
    LibraryType,
    ParseResult,
)

__all__ = [
    "DEFAULT_CHAPTER",
    "LOOSE_LEAF_VOLUME",
    "BasicParser",
    "BookMetadataExtractor",
    "BookParser",
    "ContentFormat",
    "EmbeddedMetadata",
    "LibraryType",
    "ParseResult",
    "ParsingStrategy",
    "is_loose_leaf",
    "merge",
    "parse_chapter",
    "parse_series",
    "parse_volume",
]
