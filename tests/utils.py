from __future__ import annotations

import zipfile
from html import escape
from pathlib import Path

CONTAINER_XML = """<?xml version="1.0"?>
<container version="1.0" xmlns="urn:oasis:names:tc:opendocument:xmlns:container">
  <rootfiles>
    <rootfile full-path="OEBPS/content.opf" media-type="application/oebps-package+xml"/>
  </rootfiles>
</container>
"""


def chapter_xhtml(paragraphs: list[str], title: str = "Chapter") -> str:
    """Render paragraphs as a small XHTML chapter with a head title."""
    body = "".join(f"<p>{escape(paragraph)}</p>" for paragraph in paragraphs)
    return (
        "<html xmlns='http://www.w3.org/1999/xhtml'>"
        f"<head><title>{escape(title)}</title></head>"
        f"<body>{body}</body></html>"
    )


def write_minimal_epub(
    path: Path, chapters: list[list[str]], include_spine: bool = True
) -> None:
    """Create a minimal EPUB whose chapters hold the given paragraphs."""
    manifest = []
    spine = []
    for idx in range(1, len(chapters) + 1):
        manifest.append(
            f'<item id="chap{idx}" href="chapter{idx}.xhtml" '
            'media-type="application/xhtml+xml"/>'
        )
        spine.append(f'<itemref idref="chap{idx}"/>')
    spine_block = f"<spine>{''.join(spine)}</spine>" if include_spine else "<spine/>"
    opf = f"""<?xml version="1.0" encoding="utf-8"?>
<package version="3.0" xmlns="http://www.idpf.org/2007/opf">
  <metadata xmlns:dc="http://purl.org/dc/elements/1.1/"><dc:title>Test</dc:title></metadata>
  <manifest>{''.join(manifest)}</manifest>
  {spine_block}
</package>
"""
    with zipfile.ZipFile(path, "w") as zf:
        zf.writestr("mimetype", "application/epub+zip", compress_type=zipfile.ZIP_STORED)
        zf.writestr("META-INF/container.xml", CONTAINER_XML)
        zf.writestr("OEBPS/content.opf", opf)
        for idx, paragraphs in enumerate(chapters, start=1):
            zf.writestr(f"OEBPS/chapter{idx}.xhtml", chapter_xhtml(paragraphs))
