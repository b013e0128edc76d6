# ABOUTME: In-process entry point for the scan orchestrator: picks a strategy and parses one file.
# ABOUTME: Strategies are tried in order and the first one whose is_applicable is true wins.

import logging
from collections.abc import Sequence

from shelfparse.core.filesystem import FileSystem, LocalFileSystem
from shelfparse.formats.comicinfo import read_comic_info
from shelfparse.formats.epub import EpubMetadataExtractor
from shelfparse.parsing.basic import BasicParser
from shelfparse.parsing.book import BookParser
from shelfparse.parsing.strategy import ParsingStrategy
from shelfparse.parsing.types import LibraryType, ParseResult

logger = logging.getLogger(__name__)


class FileParser:
    """Selects a parsing strategy by capability and runs it.

    Holds no per-file state, so one instance can be shared by many scan
    workers.
    """

    def __init__(self, strategies: Sequence[ParsingStrategy], fs: FileSystem) -> None:
        self._strategies = tuple(strategies)
        self._fs = fs

    @classmethod
    def default(cls, fs: FileSystem | None = None) -> "FileParser":
        """Standard wiring: BookParser for EPUBs, BasicParser for everything else."""
        fs = fs or LocalFileSystem()
        basic = BasicParser()
        book = BookParser(EpubMetadataExtractor(fs), basic)
        return cls([book, basic], fs)

    def select(self, file_path: str, library_type: LibraryType) -> ParsingStrategy | None:
        """First strategy that claims the file, or None for unsupported files."""
        for strategy in self._strategies:
            if strategy.is_applicable(file_path, library_type):
                return strategy
        return None

    def parse(
        self,
        file_path: str,
        root_path: str,
        library_type: LibraryType,
        *,
        enable_metadata: bool = True,
    ) -> ParseResult | None:
        """Parse one file. Returns None when it cannot be cataloged."""
        strategy = self.select(file_path, library_type)
        if strategy is None:
            logger.debug("No strategy applies to %s", file_path)
            return None

        sidecar = read_comic_info(file_path, self._fs) if enable_metadata else None
        result = strategy.parse(
            file_path,
            root_path,
            library_type,
            enable_metadata=enable_metadata,
            embedded_metadata=sidecar,
        )
        if result is None:
            logger.debug("Could not catalog %s", file_path)
        return result
