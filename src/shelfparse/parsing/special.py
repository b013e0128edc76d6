# ABOUTME: SpecialDetector: recognizes bonus/extra releases from filename and folder conventions.
# ABOUTME: An SPn marker always wins; keywords and special folders need an unnumbered release.

import re

from shelfparse.parsing.rules import (
    SPECIAL_FOLDER_RE,
    SPECIAL_KEYWORD_RULES,
    SPECIAL_MARKER_RE,
)
from shelfparse.parsing.tokens import (
    is_default_chapter,
    is_loose_leaf,
    parse_chapter,
    parse_volume,
)
from shelfparse.parsing.types import LibraryType

_WHITESPACE_RE = re.compile(r"\s+")


def has_special_marker(text: str) -> bool:
    """Whether ``text`` carries an explicit ``SPn`` marker."""
    return SPECIAL_MARKER_RE.search(text) is not None


def parse_special_index(text: str) -> int:
    """The ``n`` in an ``SPn`` marker, or 0 when there is no marker."""
    match = SPECIAL_MARKER_RE.search(text)
    return int(match.group("Index")) if match else 0


def has_special_keyword(text: str, library_type: LibraryType) -> bool:
    return any(
        rule.pattern.search(text)
        for rule in SPECIAL_KEYWORD_RULES
        if rule.applies_to(library_type)
    )


def is_special_folder(folder_name: str) -> bool:
    """Folders like "Specials" or "Omake" hold extras, never a series."""
    return SPECIAL_FOLDER_RE.match(folder_name.strip()) is not None


def is_special(
    filename: str, folder_name: str = "", library_type: LibraryType = LibraryType.MANGA
) -> bool:
    """Decide whether a release is bonus content rather than a numbered one.

    An ``SPn`` marker in the filename is always special. Otherwise a special
    keyword in the filename, or a special folder (by name or keyword), only
    counts when the filename carries no volume and no chapter token.
    """
    if has_special_marker(filename):
        return True

    flagged = has_special_keyword(filename, library_type)
    if not flagged and folder_name:
        flagged = is_special_folder(folder_name) or has_special_keyword(
            folder_name, library_type
        )
    if not flagged:
        return False

    return is_loose_leaf(parse_volume(filename, library_type)) and is_default_chapter(
        parse_chapter(filename, library_type)
    )


def clean_special_title(title: str) -> str:
    """Remove the ``SPn`` marker from a title.

    ``"[Renzokusei] Special 1 SP02"`` -> ``"[Renzokusei] Special 1"``.
    Returns the input unchanged if nothing would be left.
    """
    cleaned = SPECIAL_MARKER_RE.sub(" ", title).replace("_", " ")
    cleaned = _WHITESPACE_RE.sub(" ", cleaned).strip(" -")
    return cleaned or title
