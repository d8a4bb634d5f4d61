"""Minimal Markdown to HTML conversion for CMS updates.

Only a small subset is supported, on purpose:

- ``#``, ``##`` and ``###`` headings;
- ``**strong**`` and ``*emphasis*``;
- ``- `` list items, consecutive items grouped into one ``<ul>``;
- blank lines separate paragraphs, single newlines become ``<br>``.

Everything else passes through untouched, including inline HTML.
"""

from __future__ import annotations

import re

_HEADING_RE = re.compile(r"^(#{1,3}) (.+)$")
_LIST_ITEM_RE = re.compile(r"^- (.+)$")
_STRONG_RE = re.compile(r"\*\*(.+?)\*\*")
_EM_RE = re.compile(r"\*(.+?)\*")
_BLANK_LINES_RE = re.compile(r"\n[ \t]*\n")


def _inline(text: str) -> str:
    text = _STRONG_RE.sub(r"<strong>\1</strong>", text)
    return _EM_RE.sub(r"<em>\1</em>", text)


def _render_block(block: str) -> list[str]:
    out: list[str] = []
    paragraph: list[str] = []
    items: list[str] = []

    def flush_paragraph() -> None:
        if paragraph:
            out.append("<p>" + "<br>".join(paragraph) + "</p>")
            paragraph.clear()

    def flush_items() -> None:
        if items:
            out.append("<ul>" + "".join(f"<li>{item}</li>" for item in items) + "</ul>")
            items.clear()

    for line in block.splitlines():
        heading = _HEADING_RE.match(line)
        item = _LIST_ITEM_RE.match(line)
        if heading:
            flush_paragraph()
            flush_items()
            level = len(heading.group(1))
            out.append(f"<h{level}>{_inline(heading.group(2).strip())}</h{level}>")
        elif item:
            flush_paragraph()
            items.append(_inline(item.group(1).strip()))
        else:
            flush_items()
            paragraph.append(_inline(line))

    flush_paragraph()
    flush_items()
    return out


def markdown_to_html(md: str) -> str:
    """Convert the supported Markdown subset to an HTML fragment.

    Blank input is returned unchanged.
    """
    text = md.replace("\r\n", "\n").strip("\n")
    if not text.strip():
        return md
    html: list[str] = []
    for block in _BLANK_LINES_RE.split(text):
        html.extend(_render_block(block))
    return "".join(html)
