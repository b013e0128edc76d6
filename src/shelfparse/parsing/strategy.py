# ABOUTME: Protocols for parsing strategies and the EPUB metadata collaborator.
# ABOUTME: BasicParser and BookParser implement ParsingStrategy; formats.epub implements the extractor.

from typing import Protocol, runtime_checkable

from shelfparse.parsing.types import EmbeddedMetadata, LibraryType, ParseResult


@runtime_checkable
class ParsingStrategy(Protocol):
    """Protocol for a filename/metadata parsing strategy.

    ``is_applicable`` decides by capability whether the strategy claims a
    file; ``parse`` returns None when the file cannot be cataloged.
    """

    def is_applicable(self, file_path: str, library_type: LibraryType) -> bool: ...

    def parse(
        self,
        file_path: str,
        root_path: str,
        library_type: LibraryType,
        *,
        enable_metadata: bool = True,
        embedded_metadata: EmbeddedMetadata | None = None,
    ) -> ParseResult | None: ...


@runtime_checkable
class BookMetadataExtractor(Protocol):
    """Reads the descriptive metadata stored inside an EPUB."""

    def parse_info(self, file_path: str) -> ParseResult | None: ...
