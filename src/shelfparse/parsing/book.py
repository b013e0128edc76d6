# ABOUTME: BookParser: EPUB strategy driven by the book's internal metadata.
# ABOUTME: Reconciles series/volume with a BasicParser second opinion forced to Book rules.

import logging
from dataclasses import replace

from shelfparse.parsing.merge import merge
from shelfparse.parsing.paths import (
    file_name,
    is_epub,
    normalize_path,
    remove_extension_if_supported,
)
from shelfparse.parsing.strategy import BookMetadataExtractor, ParsingStrategy
from shelfparse.parsing.tokens import is_loose_leaf, parse_chapter, parse_series, parse_volume
from shelfparse.parsing.types import ContentFormat, EmbeddedMetadata, LibraryType, ParseResult

logger = logging.getLogger(__name__)


class BookParser:
    """Parsing strategy for EPUB files.

    Args:
        extractor: Reads series/title information stored inside the EPUB.
        basic_parser: Filename/folder strategy consulted as a second opinion.
    """

    def __init__(self, extractor: BookMetadataExtractor, basic_parser: ParsingStrategy) -> None:
        self._extractor = extractor
        self._basic_parser = basic_parser

    def is_applicable(self, file_path: str, library_type: LibraryType) -> bool:
        return is_epub(file_path)

    def parse(
        self,
        file_path: str,
        root_path: str,
        library_type: LibraryType,
        *,
        enable_metadata: bool = True,
        embedded_metadata: EmbeddedMetadata | None = None,
    ) -> ParseResult | None:
        if enable_metadata:
            info = self._extractor.parse_info(file_path)
            if info is None:
                logger.debug("No internal metadata for %s", file_path)
                return None
        else:
            info = self._from_filename(file_path, library_type)

        info = replace(info, embedded_metadata=embedded_metadata)

        # A special filed under a generic name takes the sidecar's series.
        if (
            info.is_special
            and is_loose_leaf(info.volumes)
            and embedded_metadata is not None
            and embedded_metadata.has_series
            and embedded_metadata.series != info.series
        ):
            info = replace(info, series=embedded_metadata.series)

        if not is_loose_leaf(parse_volume(info.series, library_type)):
            info = self._reconcile_volume(
                info, file_path, root_path, library_type, enable_metadata, embedded_metadata
            )

        if not info.series:
            logger.debug("No series could be derived for %s", file_path)
            return None
        return info

    def _from_filename(self, file_path: str, library_type: LibraryType) -> ParseResult:
        full_path = normalize_path(file_path)
        filename = file_name(full_path)
        stem = remove_extension_if_supported(filename)
        return ParseResult(
            full_path=full_path,
            filename=filename,
            title=stem,
            series=parse_series(stem, library_type),
            volumes=parse_volume(stem, library_type),
            chapters=parse_chapter(stem, library_type),
            format=ContentFormat.EPUB,
        )

    def _reconcile_volume(
        self,
        info: ParseResult,
        file_path: str,
        root_path: str,
        library_type: LibraryType,
        enable_metadata: bool,
        embedded_metadata: EmbeddedMetadata | None,
    ) -> ParseResult:
        """Handle a series name that itself carries a volume token."""
        volume_from_title = parse_volume(info.title, library_type)
        volume_from_series = parse_volume(info.series, library_type)
        has_volume_in_title = not is_loose_leaf(volume_from_title)
        has_volume_in_series = not is_loose_leaf(volume_from_series)
        sidecar_has_volume = embedded_metadata is not None and embedded_metadata.has_volume

        if (
            not sidecar_has_volume
            and has_volume_in_title
            and (has_volume_in_series or not info.series)
        ):
            # "Series Name Vol 3" in the title: the title names the series.
            return replace(
                info,
                series=parse_series(info.title, library_type),
                volumes=volume_from_title,
            )

        second_opinion = self._basic_parser.parse(
            file_path,
            root_path,
            LibraryType.BOOK,
            enable_metadata=enable_metadata,
            embedded_metadata=embedded_metadata,
        )
        info = merge(info, second_opinion)

        if (
            has_volume_in_series
            and second_opinion is not None
            and is_loose_leaf(parse_volume(second_opinion.series, library_type))
        ):
            info = replace(info, series=second_opinion.series)
        return info
