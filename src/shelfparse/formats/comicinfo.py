# ABOUTME: ComicInfo.xml sidecar reader for zip-based comic archives.
# ABOUTME: Missing or malformed sidecars are treated as absent, never as parse failures.

import io
import logging
import zipfile
from xml.etree import ElementTree

from shelfparse.core.filesystem import FileSystem
from shelfparse.parsing.paths import file_name, strip_supported_extension
from shelfparse.parsing.types import EmbeddedMetadata

logger = logging.getLogger(__name__)

COMIC_INFO_NAME = "comicinfo.xml"
ZIP_EXTENSIONS: frozenset[str] = frozenset({".cbz", ".zip"})

# ComicInfo element -> EmbeddedMetadata field
_FIELDS = {
    "series": "series",
    "volume": "volume",
    "number": "number",
    "title": "title",
    "localizedseries": "localized_series",
    "titlesort": "title_sort",
    "summary": "summary",
}


def _local_name(tag: str) -> str:
    """Strip any XML namespace and lower-case the tag."""
    return tag.rsplit("}", 1)[-1].lower()


def parse_comic_info_xml(data: bytes) -> EmbeddedMetadata | None:
    """Parse ComicInfo.xml content. Returns None for malformed XML."""
    try:
        root = ElementTree.fromstring(data)
    except ElementTree.ParseError as exc:
        logger.warning("Malformed ComicInfo.xml: %s", exc)
        return None

    if _local_name(root.tag) != "comicinfo":
        logger.warning("Unexpected ComicInfo root element: %s", root.tag)
        return None

    values: dict[str, str] = {}
    for child in root:
        field_name = _FIELDS.get(_local_name(child.tag))
        if field_name and child.text and field_name not in values:
            values[field_name] = child.text.strip()
    return EmbeddedMetadata(**values)


def _find_comic_info(archive: zipfile.ZipFile) -> str | None:
    """Archive member named ComicInfo.xml, preferring the shallowest one."""
    candidates = [
        name
        for name in archive.namelist()
        if name.rsplit("/", 1)[-1].lower() == COMIC_INFO_NAME
    ]
    if not candidates:
        return None
    return min(candidates, key=lambda name: (name.count("/"), name))


def read_comic_info(path: str, fs: FileSystem) -> EmbeddedMetadata | None:
    """Read the ComicInfo sidecar embedded in a zip-based archive.

    Args:
        path: Path of the archive.
        fs: File-system abstraction used to read the archive bytes.

    Returns:
        The parsed record, or None when the file is not a zip archive, has no
        ComicInfo.xml, or cannot be read.
    """
    stripped = strip_supported_extension(file_name(path))
    if stripped is None or stripped[1] not in ZIP_EXTENSIONS:
        return None
    if not fs.exists(path):
        return None

    try:
        with zipfile.ZipFile(io.BytesIO(fs.read_bytes(path))) as archive:
            member = _find_comic_info(archive)
            if member is None:
                return None
            data = archive.read(member)
    except (zipfile.BadZipFile, OSError) as exc:
        logger.warning("Could not read ComicInfo from %s: %s", path, exc)
        return None

    return parse_comic_info_xml(data)
