# ABOUTME: TokenRules evaluation: series, volume, chapter and edition extraction from text.
# ABOUTME: Pure functions over the immutable tables in rules.py; no state, no I/O.

import re

from shelfparse.parsing.rules import (
    CHAPTER_RULES,
    EDITION_RULES,
    SERIES_RULES,
    VOLUME_RULES,
    TokenRule,
)
from shelfparse.parsing.types import DEFAULT_CHAPTER, LOOSE_LEAF_VOLUME, LibraryType

_RELEASE_GROUP_RE = re.compile(r"\[[^\]]*\]|\([^)]*\)|\{[^}]*\}")
_WHITESPACE_RE = re.compile(r"\s+")
_LEADING_ZEROES_RE = re.compile(r"^0+(?=\d)")


def _applicable(rules: tuple[TokenRule, ...], library_type: LibraryType):
    return (rule for rule in rules if rule.applies_to(library_type))


def _remove_leading_zeroes(value: str) -> str:
    return _LEADING_ZEROES_RE.sub("", value.strip())


def _add_chapter_part(value: str) -> str:
    """``153`` with a ``b`` part marker means the half chapter ``153.5``."""
    return value if "." in value else f"{value}.5"


def format_value(value: str, has_part: bool = False) -> str:
    """Normalize a raw numeric token or range into its canonical string form.

    ``"0982"`` -> ``"982"``, ``"01-03"`` -> ``"1-3"``, ``"c01-c02"`` ranges drop
    the stray ``c``, and a part marker turns ``"153"`` into ``"153.5"``.
    """
    if "-" not in value:
        return _remove_leading_zeroes(_add_chapter_part(value) if has_part else value)

    tokens = value.split("-")
    start = _remove_leading_zeroes(tokens[0])
    if len(tokens) != 2 or not tokens[1]:
        return start
    end = tokens[1].lstrip("cC")
    end = _remove_leading_zeroes(_add_chapter_part(end) if has_part else end)
    return f"{start}-{end}"


def is_loose_leaf(token: str) -> bool:
    """True iff the volume token is the loose-leaf sentinel."""
    return token == LOOSE_LEAF_VOLUME


def is_default_chapter(token: str) -> bool:
    """True iff the chapter token is the default/special sentinel."""
    return token == DEFAULT_CHAPTER


def clean_title(title: str) -> str:
    """Strip release groups, separators and stray punctuation from a raw title.

    ``"[BAA]_Darker_than_Black_"`` -> ``"Darker than Black"``,
    ``"Harry Potter -"`` -> ``"Harry Potter"``.
    """
    cleaned = title.replace("_", " ")
    cleaned = _RELEASE_GROUP_RE.sub(" ", cleaned)
    cleaned = _WHITESPACE_RE.sub(" ", cleaned).strip()
    return cleaned.strip("-,").strip()


def _first_group(
    rules: tuple[TokenRule, ...], text: str, library_type: LibraryType, group: str
) -> re.Match[str] | None:
    for rule in _applicable(rules, library_type):
        for match in rule.pattern.finditer(text):
            if group in match.groupdict() and match.group(group):
                return match
    return None


def match_series(text: str, library_type: LibraryType) -> str:
    """Series name according to the rule tables, or ``""`` when no rule fits."""
    for rule in _applicable(SERIES_RULES, library_type):
        for match in rule.pattern.finditer(text):
            raw = match.groupdict().get("Series")
            if not raw:
                continue
            cleaned = clean_title(raw)
            if cleaned:
                return cleaned
    return ""


def parse_series(text: str, library_type: LibraryType) -> str:
    """Best-effort series name. Never fails: falls back to the cleaned input."""
    series = match_series(text, library_type)
    if series:
        return series
    return clean_title(text) or text.strip()


def parse_volume(text: str, library_type: LibraryType) -> str:
    """Volume token found in ``text``, or LOOSE_LEAF_VOLUME."""
    match = _first_group(VOLUME_RULES, text, library_type, "Volume")
    if match is None:
        return LOOSE_LEAF_VOLUME
    return format_value(match.group("Volume"))


def parse_chapter(text: str, library_type: LibraryType) -> str:
    """Chapter token found in ``text``, or DEFAULT_CHAPTER."""
    match = _first_group(CHAPTER_RULES, text, library_type, "Chapter")
    if match is None:
        return DEFAULT_CHAPTER
    has_part = bool(match.groupdict().get("Part"))
    return format_value(match.group("Chapter"), has_part)


def parse_edition(text: str, library_type: LibraryType = LibraryType.MANGA) -> str:
    """Edition tag such as "Omnibus" or "Full Color", or ``""``."""
    match = _first_group(EDITION_RULES, text, library_type, "Edition")
    return match.group("Edition") if match else ""


