# ABOUTME: Unit tests for EPUB internal-metadata extraction.
# ABOUTME: Reads calibre and EPUB 3 series metadata from real files built with ebooklib.

import logging
from pathlib import Path

import pytest

from shelfparse.formats.epub import (
    EpubMetadataExtractor,
    EpubReadError,
    _format_series_index,
    open_epub,
)
from shelfparse.parsing.strategy import BookMetadataExtractor
from shelfparse.parsing.types import DEFAULT_CHAPTER, LOOSE_LEAF_VOLUME, ContentFormat


@pytest.fixture
def extractor() -> EpubMetadataExtractor:
    return EpubMetadataExtractor()


class TestParseInfo:
    """Tests for EpubMetadataExtractor.parse_info."""

    def test_calibre_series(self, extractor: EpubMetadataExtractor, series_epub: Path) -> None:
        info = extractor.parse_info(str(series_epub))
        assert info is not None
        assert info.series == "Accel World"
        assert info.series_sort == "Accel World"
        assert info.volumes == "2"
        assert info.chapters == DEFAULT_CHAPTER
        assert info.title == "Accel World: The Red Storm Princess"
        assert info.format is ContentFormat.EPUB
        assert info.filename == "accel_world_02.epub"

    def test_epub3_collection(
        self, extractor: EpubMetadataExtractor, collection_epub: Path
    ) -> None:
        info = extractor.parse_info(str(collection_epub))
        assert info is not None
        assert info.series == "The Hollows"
        assert info.volumes == "2.5"
        assert info.title == "Good, The Bad, and the Undead, The"

    def test_no_series_uses_title(
        self, extractor: EpubMetadataExtractor, plain_epub: Path
    ) -> None:
        info = extractor.parse_info(str(plain_epub))
        assert info is not None
        assert info.series == "The Name of the Rose"
        assert info.title == "The Name of the Rose"
        assert info.volumes == LOOSE_LEAF_VOLUME
        assert info.is_special is False

    def test_corrupt_file_returns_none(
        self, extractor: EpubMetadataExtractor, corrupt_epub: Path, caplog
    ) -> None:
        with caplog.at_level(logging.WARNING):
            assert extractor.parse_info(str(corrupt_epub)) is None
        assert any("corrupt.epub" in record.message for record in caplog.records)

    def test_missing_file_returns_none(
        self, extractor: EpubMetadataExtractor, tmp_path: Path
    ) -> None:
        assert extractor.parse_info(str(tmp_path / "missing.epub")) is None

    def test_satisfies_protocol(self, extractor: EpubMetadataExtractor) -> None:
        assert isinstance(extractor, BookMetadataExtractor)


class TestOpenEpub:
    """Tests for the ebooklib wrapper."""

    def test_corrupt_raises(self, corrupt_epub: Path) -> None:
        with pytest.raises(EpubReadError):
            open_epub(corrupt_epub)

    def test_missing_raises(self, tmp_path: Path) -> None:
        with pytest.raises(EpubReadError, match="not found"):
            open_epub(tmp_path / "does_not_exist.epub")


class TestFormatSeriesIndex:
    """Calibre float indexes become volume tokens."""

    @pytest.mark.parametrize(
        ("index", "expected"),
        [("2.0", "2"), ("1.5", "1.5"), ("3", "3"), ("02", "2"), ("1-3", "1-3")],
    )
    def test_format(self, index: str, expected: str) -> None:
        assert _format_series_index(index) == expected
