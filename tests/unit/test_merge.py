# ABOUTME: Unit tests for the merge reducer.
# ABOUTME: Identity, precedence of set fields, sentinel fallback, and sidecar retention.

from dataclasses import fields, replace

import pytest

from shelfparse.parsing.merge import merge
from shelfparse.parsing.types import (
    DEFAULT_CHAPTER,
    LOOSE_LEAF_VOLUME,
    ContentFormat,
    EmbeddedMetadata,
    ParseResult,
)


@pytest.fixture
def full() -> ParseResult:
    return ParseResult(
        full_path="/books/Hollows/Hollows Vol 2.epub",
        filename="Hollows Vol 2.epub",
        title="The Good, The Bad, and the Undead",
        series="Hollows",
        volumes="2",
        chapters="5",
        format=ContentFormat.EPUB,
        is_special=False,
        edition="Omnibus",
        series_sort="Hollows",
        special_index=0,
        embedded_metadata=EmbeddedMetadata(series="Hollows", volume="2"),
    )


@pytest.fixture
def sparse() -> ParseResult:
    return ParseResult(
        full_path="/books/Hollows/Hollows Vol 2.epub",
        filename="Hollows Vol 2.epub",
        title="",
        format=ContentFormat.EPUB,
    )


class TestMergeIdentity:
    """Merging a result with itself changes nothing."""

    def test_merge_with_self(self, full: ParseResult) -> None:
        assert merge(full, full) == full

    def test_merge_sparse_with_self(self, sparse: ParseResult) -> None:
        assert merge(sparse, sparse) == sparse

    def test_merge_with_none(self, full: ParseResult) -> None:
        assert merge(full, None) is full


class TestMergePrecedence:
    """Primary wins wherever it is set; secondary fills the gaps."""

    def test_unset_fields_come_from_secondary(
        self, sparse: ParseResult, full: ParseResult
    ) -> None:
        merged = merge(sparse, full)
        assert merged.title == full.title
        assert merged.series == "Hollows"
        assert merged.volumes == "2"
        assert merged.chapters == "5"
        assert merged.edition == "Omnibus"
        assert merged.series_sort == "Hollows"
        assert merged.embedded_metadata == full.embedded_metadata

    def test_set_fields_keep_primary(self, sparse: ParseResult, full: ParseResult) -> None:
        merged = merge(full, sparse)
        for field in fields(ParseResult):
            assert getattr(merged, field.name) == getattr(full, field.name)

    def test_sentinels_count_as_unset(self, full: ParseResult) -> None:
        primary = ParseResult(
            full_path=full.full_path,
            filename=full.filename,
            title="Title",
            series="Series",
            volumes=LOOSE_LEAF_VOLUME,
            chapters=DEFAULT_CHAPTER,
        )
        merged = merge(primary, full)
        assert merged.series == "Series"
        assert merged.volumes == "2"
        assert merged.chapters == "5"

    def test_format_always_from_primary(self, full: ParseResult) -> None:
        primary = ParseResult(full_path="a.cbz", filename="a.cbz", title="a")
        assert merge(primary, full).format is ContentFormat.ARCHIVE

    def test_special_flag_is_sticky(self, full: ParseResult) -> None:
        special = ParseResult(
            full_path="x.cbz", filename="x.cbz", title="x", is_special=True, special_index=3
        )
        merged = merge(full, special)
        assert merged.is_special is True
        assert merged.special_index == 3

    def test_sidecar_retained_from_either_side(
        self, full: ParseResult, sparse: ParseResult
    ) -> None:
        assert merge(full, sparse).embedded_metadata is full.embedded_metadata
        assert merge(sparse, full).embedded_metadata is full.embedded_metadata

    def test_inputs_are_not_modified(self, sparse: ParseResult, full: ParseResult) -> None:
        before = replace(sparse)
        merge(sparse, full)
        assert sparse == before
        assert sparse.series == ""
