from __future__ import annotations

import xml.etree.ElementTree as ET
import zipfile
from html.parser import HTMLParser
from pathlib import Path, PurePosixPath
from typing import List

CONTAINER_PATH = "META-INF/container.xml"
TEXT_MEDIA_PREFIXES = ("application/xhtml", "text/html", "text/plain")
TEXT_SUFFIXES = {".xhtml", ".html", ".htm", ".txt"}


class EPUBParseError(RuntimeError):
    """Raised when an EPUB archive cannot be parsed."""


def extract_paragraphs_from_epub(epub_path: Path) -> List[str]:
    """Return the non-empty paragraphs of every readable chapter, in spine order."""
    if not epub_path.exists():
        raise EPUBParseError(f"EPUB file not found: {epub_path}")
    try:
        with zipfile.ZipFile(epub_path, "r") as archive:
            paragraphs: List[str] = []
            for member in _chapter_members(archive):
                try:
                    markup = archive.read(member).decode("utf-8", errors="ignore")
                except KeyError:
                    continue
                paragraphs.extend(_paragraphs_from_markup(markup))
            return paragraphs
    except zipfile.BadZipFile as exc:
        raise EPUBParseError(f"Invalid EPUB archive: {epub_path}") from exc


def extract_text_from_epub(epub_path: Path) -> str:
    """Return the EPUB's paragraphs as newline-separated document text."""
    return "\n".join(extract_paragraphs_from_epub(epub_path))


def _chapter_members(archive: zipfile.ZipFile) -> List[str]:
    opf_path = _package_path(archive)
    members = _spine_members(archive, opf_path)
    if members:
        return members
    return [
        name
        for name in archive.namelist()
        if PurePosixPath(name).suffix.lower() in TEXT_SUFFIXES
    ]


def _package_path(archive: zipfile.ZipFile) -> str:
    try:
        root = ET.fromstring(archive.read(CONTAINER_PATH))
    except KeyError as exc:
        raise EPUBParseError(f"EPUB missing {CONTAINER_PATH}") from exc
    except ET.ParseError as exc:
        raise EPUBParseError("Unable to parse container.xml") from exc
    rootfile = root.find(".//{*}rootfile")
    full_path = rootfile.attrib.get("full-path") if rootfile is not None else None
    if not full_path:
        raise EPUBParseError("container.xml does not name a package document")
    return full_path


def _spine_members(archive: zipfile.ZipFile, opf_path: str) -> List[str]:
    try:
        root = ET.fromstring(archive.read(opf_path))
    except (KeyError, ET.ParseError):
        return []

    hrefs: dict[str, str] = {}
    for item in root.iterfind(".//{*}manifest/{*}item"):
        media_type = item.attrib.get("media-type", "").lower()
        if item.attrib.get("id") and item.attrib.get("href") and media_type.startswith(
            TEXT_MEDIA_PREFIXES
        ):
            hrefs[item.attrib["id"]] = item.attrib["href"]

    base = PurePosixPath(opf_path).parent
    members: List[str] = []
    for itemref in root.iterfind(".//{*}spine/{*}itemref"):
        href = hrefs.get(itemref.attrib.get("idref", ""))
        if href:
            members.append((base / href).as_posix())
    return members


class _ParagraphCollector(HTMLParser):
    """Collect text per block-level element; each block becomes a paragraph."""

    BLOCK_TAGS = {
        "p",
        "div",
        "br",
        "li",
        "blockquote",
        "section",
        "article",
        "h1",
        "h2",
        "h3",
        "h4",
        "h5",
        "h6",
    }

    SKIPPED_TAGS = {"head", "script", "style"}

    def __init__(self) -> None:
        super().__init__()
        self.paragraphs: List[str] = []
        self._words: List[str] = []
        self._skip_depth = 0

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        if tag in self.SKIPPED_TAGS:
            self._skip_depth += 1
        elif tag in self.BLOCK_TAGS:
            self._flush()

    def handle_endtag(self, tag: str) -> None:
        if tag in self.SKIPPED_TAGS:
            self._skip_depth = max(0, self._skip_depth - 1)
        elif tag in self.BLOCK_TAGS:
            self._flush()

    def handle_data(self, data: str) -> None:
        if not self._skip_depth:
            self._words.extend(data.split())

    def close(self) -> None:
        super().close()
        self._flush()

    def _flush(self) -> None:
        if self._words:
            self.paragraphs.append(" ".join(self._words))
            self._words = []


def _paragraphs_from_markup(markup: str) -> List[str]:
    collector = _ParagraphCollector()
    collector.feed(markup)
    collector.close()
    return collector.paragraphs
