# ABOUTME: Directory scanner that runs the parsing engine over a library tree.
# ABOUTME: Read-only report of parsed files grouped by series, plus the files that were skipped.

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from shelfparse.parsing.paths import is_supported
from shelfparse.parsing.types import LibraryType, ParseResult

if TYPE_CHECKING:
    from shelfparse.core.dispatch import FileParser


@dataclass
class SeriesEntry:
    """All parsed files that share one series name."""

    name: str
    results: list[ParseResult] = field(default_factory=list)

    @property
    def volumes(self) -> list[str]:
        """Distinct volume tokens, in first-seen order."""
        return list(dict.fromkeys(result.volumes for result in self.results))

    @property
    def special_count(self) -> int:
        return sum(1 for result in self.results if result.is_special)


@dataclass
class ScanReport:
    """Aggregated results from parsing a directory tree."""

    scan_root: Path
    library_type: LibraryType
    series: list[SeriesEntry]
    skipped: list[Path]
    unsupported: int = 0

    @property
    def total_parsed(self) -> int:
        """Number of files that produced a usable result."""
        return sum(len(entry.results) for entry in self.series)


def scan_library(
    root: Path,
    parser: FileParser,
    library_type: LibraryType,
    enable_metadata: bool = True,
) -> ScanReport:
    """Walk ``root`` and parse every supported file with ``root`` as library root.

    Files are visited in sorted order so repeated scans report identically.
    Files with unsupported extensions are counted but never handed to the
    parser. Files the parser rejects are listed in ``skipped``.

    Args:
        root: The top-level library directory.
        parser: The dispatching file parser.
        library_type: Cataloging convention for the whole tree.
        enable_metadata: Whether embedded metadata may be consulted.

    Returns:
        A ScanReport grouping results by series name.
    """
    by_series: dict[str, list[ParseResult]] = defaultdict(list)
    skipped: list[Path] = []
    unsupported = 0

    for path in sorted(root.rglob("*")):
        if not path.is_file():
            continue
        if not is_supported(path.name):
            unsupported += 1
            continue

        result = parser.parse(
            str(path), str(root), library_type, enable_metadata=enable_metadata
        )
        if result is None:
            skipped.append(path)
            continue
        by_series[result.series].append(result)

    series = [SeriesEntry(name=name, results=by_series[name]) for name in sorted(by_series)]
    return ScanReport(
        scan_root=root,
        library_type=library_type,
        series=series,
        skipped=skipped,
        unsupported=unsupported,
    )
