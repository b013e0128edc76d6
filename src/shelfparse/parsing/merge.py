# ABOUTME: Merge: combines a primary parse result with a second opinion into a new result.
# ABOUTME: Primary wins field by field unless its value is unset; order encodes precedence.

from dataclasses import replace

from shelfparse.parsing.tokens import is_default_chapter, is_loose_leaf
from shelfparse.parsing.types import ParseResult


def _first_set(primary: str, secondary: str) -> str:
    return primary if primary else secondary


def merge(primary: ParseResult, secondary: ParseResult | None) -> ParseResult:
    """Fill the unset fields of ``primary`` from ``secondary``.

    Unset means an empty string, the loose-leaf/default sentinel, a zero
    special index or a missing sidecar. ``format`` always comes from
    ``primary``. Neither input is modified.
    """
    if secondary is None:
        return primary

    embedded = primary.embedded_metadata
    if embedded is None:
        embedded = secondary.embedded_metadata

    return replace(
        primary,
        full_path=_first_set(primary.full_path, secondary.full_path),
        filename=_first_set(primary.filename, secondary.filename),
        title=_first_set(primary.title, secondary.title),
        series=_first_set(primary.series, secondary.series),
        volumes=secondary.volumes if is_loose_leaf(primary.volumes) else primary.volumes,
        chapters=(
            secondary.chapters if is_default_chapter(primary.chapters) else primary.chapters
        ),
        is_special=primary.is_special or secondary.is_special,
        edition=_first_set(primary.edition, secondary.edition),
        series_sort=_first_set(primary.series_sort, secondary.series_sort),
        special_index=primary.special_index or secondary.special_index,
        embedded_metadata=embedded,
    )
