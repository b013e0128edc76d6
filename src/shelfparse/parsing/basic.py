# ABOUTME: BasicParser: filename and folder based parsing for every supported format.
# ABOUTME: Runs TokenRules on the filename, falls back to folders, then applies special detection.

import logging
import re
from dataclasses import replace

from shelfparse.parsing.paths import (
    detect_format,
    file_name,
    folders_till_root,
    is_cover_image,
    is_epub,
    is_supported,
    normalize_path,
    root_folder_name,
    strip_supported_extension,
)
from shelfparse.parsing.special import (
    clean_special_title,
    has_special_marker,
    is_special,
    is_special_folder,
    parse_special_index,
)
from shelfparse.parsing.tokens import (
    clean_title,
    format_value,
    is_default_chapter,
    is_loose_leaf,
    match_series,
    parse_chapter,
    parse_edition,
    parse_volume,
)
from shelfparse.parsing.types import (
    DEFAULT_CHAPTER,
    LOOSE_LEAF_VOLUME,
    ContentFormat,
    EmbeddedMetadata,
    LibraryType,
    ParseResult,
)

logger = logging.getLogger(__name__)

_PDF_SUFFIX_RE = re.compile(r"\.pdf$", re.IGNORECASE)


def _series_from_folder(folder: str, library_type: LibraryType) -> str:
    return match_series(folder, library_type) or clean_title(folder)


def parse_from_folders(
    result: ParseResult, root_path: str, library_type: LibraryType
) -> ParseResult:
    """Fill in identity from the folders between the library root and the file.

    Folders are visited deepest first. Each may supply a volume or chapter
    the result does not have yet (never for specials), and the top-most one
    supplies the series. Special folders such as "Specials" are skipped, so
    a special stored in ``Series/Specials/`` is grouped under ``Series``.
    With no usable folder the root folder's own name becomes the series.
    """
    folders = [
        folder
        for folder in folders_till_root(root_path, result.full_path)
        if not is_special_folder(folder)
    ]

    if not folders:
        root_name = root_folder_name(root_path) if root_path else ""
        if not root_name:
            return result
        return replace(result, series=_series_from_folder(root_name, library_type))

    volumes, chapters = result.volumes, result.chapters
    if not result.is_special:
        for folder in folders:
            if is_loose_leaf(volumes):
                volumes = parse_volume(folder, library_type)
            if is_default_chapter(chapters):
                chapters = parse_chapter(folder, library_type)

    series = _series_from_folder(folders[-1], library_type) or result.series
    return replace(result, series=series, volumes=volumes, chapters=chapters)


def _strip_edition(result: ParseResult, stem: str, library_type: LibraryType) -> ParseResult:
    edition = parse_edition(stem, library_type)
    if not edition:
        return result
    series = clean_title(result.series.replace(edition, "")) or result.series
    return replace(result, series=series, edition=edition)


def apply_sidecar_overrides(result: ParseResult, sidecar: EmbeddedMetadata) -> ParseResult:
    """Let ComicInfo volume/number values replace the filename-derived ones."""
    if sidecar.has_volume:
        result = replace(result, volumes=format_value(sidecar.volume.strip()))
    if sidecar.has_number:
        result = replace(
            result, chapters=format_value(sidecar.number.strip()), is_special=False
        )
    return result


class BasicParser:
    """Filename/folder based parsing strategy.

    Claims every supported extension except EPUB, which BookParser owns.
    BookParser still calls ``parse`` directly on EPUBs for a second opinion.
    """

    def is_applicable(self, file_path: str, library_type: LibraryType) -> bool:
        return is_supported(file_path) and not is_epub(file_path)

    def parse(
        self,
        file_path: str,
        root_path: str,
        library_type: LibraryType,
        *,
        enable_metadata: bool = True,
        embedded_metadata: EmbeddedMetadata | None = None,
    ) -> ParseResult | None:
        """Parse one file into a ParseResult, or None if it cannot be cataloged."""
        full_path = normalize_path(file_path)
        filename = file_name(full_path)
        stripped = strip_supported_extension(filename)
        if stripped is None:
            logger.debug("Unsupported extension, skipping %s", full_path)
            return None
        stem, extension = stripped
        content_format = detect_format(extension)

        if (
            content_format is ContentFormat.IMAGE
            and library_type is not LibraryType.IMAGE
            and is_cover_image(filename)
        ):
            logger.debug("Loose cover image, skipping %s", full_path)
            return None

        result = ParseResult(
            full_path=full_path,
            filename=filename,
            title=stem,
            series=match_series(stem, library_type),
            volumes=parse_volume(stem, library_type),
            chapters=parse_chapter(stem, library_type),
            format=content_format,
            embedded_metadata=embedded_metadata,
        )

        folders = folders_till_root(root_path, full_path)
        parent_folder = folders[0] if folders else ""

        if has_special_marker(stem):
            result = replace(
                result,
                title=clean_special_title(stem),
                volumes=LOOSE_LEAF_VOLUME,
                chapters=DEFAULT_CHAPTER,
                is_special=True,
                special_index=parse_special_index(stem),
            )
            result = parse_from_folders(result, root_path, library_type)
        elif is_special(stem, parent_folder, library_type):
            result = replace(result, is_special=True)
            result = parse_from_folders(result, root_path, library_type)
        elif not result.series or content_format is ContentFormat.IMAGE:
            result = parse_from_folders(result, root_path, library_type)

        result = _strip_edition(result, stem, library_type)

        series = result.series or clean_title(stem)
        series = _PDF_SUFFIX_RE.sub("", series).strip()
        result = replace(result, series=series)

        if enable_metadata and embedded_metadata is not None:
            result = apply_sidecar_overrides(result, embedded_metadata)

        if not result.series:
            logger.debug("No series could be derived for %s", full_path)
            return None
        return result
