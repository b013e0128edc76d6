# ABOUTME: Shared pytest fixtures for shelfparse tests.
# ABOUTME: Builds real EPUB files with ebooklib and ComicInfo-bearing archives with zipfile.

import zipfile
from pathlib import Path

import pytest
from ebooklib import epub

COMIC_INFO_XML = """<?xml version="1.0" encoding="utf-8"?>
<ComicInfo xmlns:xsd="http://www.w3.org/2001/XMLSchema"
           xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance">
  <Series>{series}</Series>
  <Volume>{volume}</Volume>
  <Number>{number}</Number>
  <Title>Sidecar Title</Title>
  <Summary>A sidecar summary.</Summary>
</ComicInfo>
"""


def build_epub(
    path: Path,
    title: str,
    calibre_series: str | None = None,
    calibre_index: str | None = None,
    collection: str | None = None,
    group_position: str | None = None,
    title_sort: str | None = None,
) -> Path:
    """Write a minimal valid EPUB with optional series metadata."""
    book = epub.EpubBook()
    book.set_identifier(f"id-{path.stem}")
    book.set_title(title)
    book.set_language("en")
    book.add_author("Reki Kawahara")

    if calibre_series is not None:
        book.add_metadata("OPF", "meta", "", {"name": "calibre:series", "content": calibre_series})
    if calibre_index is not None:
        book.add_metadata(
            "OPF", "meta", "", {"name": "calibre:series_index", "content": calibre_index}
        )
    if collection is not None:
        book.add_metadata(
            "OPF", "meta", collection, {"property": "belongs-to-collection", "id": "c01"}
        )
    if group_position is not None:
        book.add_metadata(
            "OPF",
            "meta",
            group_position,
            {"property": "group-position", "refines": "#c01"},
        )
    if title_sort is not None:
        book.add_metadata("OPF", "meta", "", {"name": "calibre:title_sort", "content": title_sort})

    # Add a minimal chapter so the EPUB is structurally valid
    chapter = epub.EpubHtml(title="Chapter 1", file_name="chap01.xhtml", lang="en")
    chapter.content = b"<html><body><h1>Chapter 1</h1><p>Content.</p></body></html>"
    book.add_item(chapter)

    book.toc = [epub.Link("chap01.xhtml", "Chapter 1", "chap01")]
    book.add_item(epub.EpubNcx())
    book.add_item(epub.EpubNav())
    book.spine = ["nav", chapter]

    path.parent.mkdir(parents=True, exist_ok=True)
    epub.write_epub(str(path), book)
    return path


def build_cbz(path: Path, comic_info: str | None = None) -> Path:
    """Write a small zip archive with one page and an optional ComicInfo.xml."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with zipfile.ZipFile(path, "w") as archive:
        archive.writestr("001.jpg", b"fake jpg")
        if comic_info is not None:
            archive.writestr("ComicInfo.xml", comic_info)
    return path


@pytest.fixture
def series_epub(tmp_path: Path) -> Path:
    """EPUB carrying calibre series metadata (Accel World, book 2)."""
    return build_epub(
        tmp_path / "Light Novels" / "Accel World" / "accel_world_02.epub",
        title="Accel World: The Red Storm Princess",
        calibre_series="Accel World",
        calibre_index="2.0",
    )


@pytest.fixture
def collection_epub(tmp_path: Path) -> Path:
    """EPUB 3 collection metadata with a fractional position and a sort title."""
    return build_epub(
        tmp_path / "Light Novels" / "Hollows" / "hollows.epub",
        title="The Good, The Bad, and the Undead",
        collection="The Hollows",
        group_position="2.5",
        title_sort="Good, The Bad, and the Undead, The",
    )


@pytest.fixture
def plain_epub(tmp_path: Path) -> Path:
    """EPUB with a title but no series metadata."""
    return build_epub(tmp_path / "Books" / "standalone.epub", title="The Name of the Rose")


@pytest.fixture
def corrupt_epub(tmp_path: Path) -> Path:
    """Create a corrupt file that is not a valid EPUB."""
    filepath = tmp_path / "corrupt.epub"
    filepath.write_text("this is not a valid epub file")
    return filepath


@pytest.fixture
def comic_info_cbz(tmp_path: Path) -> Path:
    """Archive whose ComicInfo says volume 3, no number."""
    xml = COMIC_INFO_XML.format(series="Sidecar Series", volume="3", number="")
    return build_cbz(tmp_path / "Manga" / "Naruto" / "Naruto v01.cbz", xml)


@pytest.fixture
def manga_library(tmp_path: Path) -> Path:
    """Create a small manga library tree.

    Layout:
        Manga/
            Naruto/
                Naruto v01.cbz
                Naruto v02.cbz
                cover.jpg
            One Piece/
                One Piece c0982.cbz
            Love Hina/
                Specials/
                    Love Hina SP01.cbz
            Accel World/
                Accel World - Volume 1.epub
            notes.txt
    """
    root = tmp_path / "Manga"
    build_cbz(root / "Naruto" / "Naruto v01.cbz")
    build_cbz(root / "Naruto" / "Naruto v02.cbz")
    (root / "Naruto" / "cover.jpg").write_bytes(b"fake jpg")
    build_cbz(root / "One Piece" / "One Piece c0982.cbz")
    build_cbz(root / "Love Hina" / "Specials" / "Love Hina SP01.cbz")
    build_epub(
        root / "Accel World" / "Accel World - Volume 1.epub",
        title="Accel World - Volume 1",
    )
    (root / "notes.txt").write_text("not a book")
    return root
