# ABOUTME: Path normalization and extension-based format detection.
# ABOUTME: Decides which files the parsing engine will look at and what format they are.

import posixpath
import re

from shelfparse.parsing.types import ContentFormat

ARCHIVE_EXTENSIONS: frozenset[str] = frozenset(
    {".cbz", ".zip", ".rar", ".cbr", ".7z", ".7zip", ".cb7", ".cbt", ".tar.gz"}
)
BOOK_EXTENSIONS: frozenset[str] = frozenset({".epub", ".pdf"})
IMAGE_EXTENSIONS: frozenset[str] = frozenset(
    {".png", ".jpg", ".jpeg", ".webp", ".gif", ".avif"}
)
SUPPORTED_EXTENSIONS: frozenset[str] = ARCHIVE_EXTENSIONS | BOOK_EXTENSIONS | IMAGE_EXTENSIONS

# Longest first so ".tar.gz" wins over a hypothetical ".gz".
_EXTENSIONS_BY_LENGTH = tuple(sorted(SUPPORTED_EXTENSIONS, key=len, reverse=True))

_FORMAT_BY_EXTENSION: dict[str, ContentFormat] = {
    ".epub": ContentFormat.EPUB,
    ".pdf": ContentFormat.PDF,
    **{ext: ContentFormat.IMAGE for ext in IMAGE_EXTENSIONS},
}

_DRIVE_LETTER_RE = re.compile(r"^([A-Za-z]):(?=/|$)")
_REPEATED_SEPARATOR_RE = re.compile(r"/{2,}")
# "cover.jpg", "folder.png", "Series - Cover.webp", but not "back cover.jpg"
_COVER_IMAGE_RE = re.compile(
    r"(?<![a-z0-9])(?<!back )(?<!back_)(?<!back-)(?:cover|folder)(?![a-z0-9])",
    re.IGNORECASE,
)


def normalize_path(path: str) -> str:
    """Rewrite a path to forward slashes with a lower-case drive letter.

    ``C:\\Manga\\\\One Piece`` and ``c:/Manga/One Piece`` normalize identically.
    """
    normalized = _REPEATED_SEPARATOR_RE.sub("/", path.replace("\\", "/"))
    return _DRIVE_LETTER_RE.sub(lambda m: f"{m.group(1).lower()}:", normalized)


def file_name(path: str) -> str:
    """Bare filename of a path, separator-agnostic."""
    return posixpath.basename(normalize_path(path).rstrip("/"))


def strip_supported_extension(filename: str) -> tuple[str, str] | None:
    """Split a filename into (stem, lower-cased extension).

    Returns None when the extension is not on the allow-list, which means
    the file is never handed to a parser.
    """
    lowered = filename.lower()
    for extension in _EXTENSIONS_BY_LENGTH:
        if lowered.endswith(extension) and len(filename) > len(extension):
            return filename[: -len(extension)], extension
    return None


def remove_extension_if_supported(filename: str) -> str:
    stripped = strip_supported_extension(filename)
    return stripped[0] if stripped else filename


def _extension_of(path: str) -> str | None:
    stripped = strip_supported_extension(file_name(path))
    return stripped[1] if stripped else None


def detect_format(extension: str) -> ContentFormat:
    """Map an extension (with or without the dot) to a content format.

    Anything not explicitly a book or image format is treated as an archive.
    """
    ext = extension.lower()
    if not ext.startswith("."):
        ext = f".{ext}"
    return _FORMAT_BY_EXTENSION.get(ext, ContentFormat.ARCHIVE)


def is_supported(path: str) -> bool:
    return _extension_of(path) is not None


def is_epub(path: str) -> bool:
    return _extension_of(path) == ".epub"


def is_pdf(path: str) -> bool:
    return _extension_of(path) == ".pdf"


def is_image(path: str) -> bool:
    return _extension_of(path) in IMAGE_EXTENSIONS


def is_archive(path: str) -> bool:
    return _extension_of(path) in ARCHIVE_EXTENSIONS


def is_cover_image(filename: str) -> bool:
    """Whether an image file is a loose cover rather than a page."""
    return is_image(filename) and _COVER_IMAGE_RE.search(file_name(filename)) is not None


def folders_till_root(root_path: str, file_path: str) -> list[str]:
    """Folder names between the root (exclusive) and the file, deepest first.

    ``folders_till_root("/manga", "/manga/Love Hina/Specials/Omake 01.cbz")``
    returns ``["Specials", "Love Hina"]``. When the file does not live under
    the root, only its immediate parent folder is returned.
    """
    directory = posixpath.dirname(normalize_path(file_path).rstrip("/"))
    root = normalize_path(root_path).rstrip("/") if root_path else ""

    if root and (directory == root or directory.lower() == root.lower()):
        return []

    prefix = f"{root}/"
    if root and directory.lower().startswith(prefix.lower()):
        relative = directory[len(prefix):]
        return [part for part in reversed(relative.split("/")) if part]

    parent = posixpath.basename(directory)
    return [parent] if parent else []


def root_folder_name(root_path: str) -> str:
    """The last component of the root path, e.g. the series folder of a scan."""
    return posixpath.basename(normalize_path(root_path).rstrip("/"))
