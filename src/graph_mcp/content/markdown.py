"""Rule-based HTML to Markdown conversion for SharePoint web part HTML.

The conversion is an ordered cascade of pattern -> replacement rules. Each
rule rewrites the whole string and later rules see the output of earlier
ones. Only the div/span unwrapping rule is applied to a fixed point; every
other rule is single-pass, so nested tags of the same kind (e.g. bold inside
bold, lists inside lists) are approximated rather than handled exactly.
"""

from __future__ import annotations

import html
import re
from dataclasses import dataclass
from typing import Callable, Sequence

from bs4 import BeautifulSoup

_FLAGS = re.IGNORECASE | re.DOTALL

Replacement = str | Callable[[re.Match[str]], str]


@dataclass(frozen=True)
class Rule:
    """A single rewrite step of the HTML to Markdown cascade."""

    name: str
    pattern: re.Pattern[str]
    replacement: Replacement
    repeat: bool = False

    def apply(self, text: str) -> str:
        """Apply the rule to the whole text.

        Args:
            text: Text produced by the previous rules

        Returns:
            Rewritten text
        """
        if not self.repeat:
            return self.pattern.sub(self.replacement, text)

        # Every substitution removes a pair of tags, so this terminates
        while self.pattern.search(text):
            text = self.pattern.sub(self.replacement, text)
        return text


def _rule(name: str, pattern: str, replacement: Replacement, repeat: bool = False) -> Rule:
    return Rule(name, re.compile(pattern, _FLAGS), replacement, repeat)


def _element(tag: str) -> str:
    """Pattern for ``<tag ...>content</tag>`` capturing the content."""
    return rf"<{tag}\b[^>]*>(.*?)</{tag}\s*>"


def _decode_entity(match: re.Match[str]) -> str:
    return html.unescape(match.group(0))


def _list_items(marker: str) -> Callable[[re.Match[str]], str]:
    """Build a replacement that rewrites the items of one list container."""
    item = re.compile(_element("li"), _FLAGS)

    def replace(match: re.Match[str]) -> str:
        body = item.sub(lambda m: f"{marker} {m.group(1).strip()}\n", match.group(1))
        # Drop the indentation whitespace that sat between the items
        lines = [line for line in body.splitlines() if line.strip()]
        return "\n" + "\n".join(lines) + "\n\n"

    return replace


_ATTRIBUTE = r"""\s{name}\s*=\s*(["'])(.*?)\1"""


def _attribute(tag_html: str, name: str) -> str | None:
    match = re.search(_ATTRIBUTE.format(name=name), tag_html, _FLAGS)
    return match.group(2) if match else None


def _image(match: re.Match[str]) -> str:
    src = _attribute(match.group(0), "src")
    if src is None:
        return ""
    alt = _attribute(match.group(0), "alt") or ""
    return f"![{alt}]({src})"


def _cell_text(cell) -> str:
    # Earlier rules leave newlines inside cells; a row must stay on one line
    text = " ".join(cell.get_text(" ", strip=True).split())
    return text.replace("|", "\\|")


def _table_row(cells: Sequence[str]) -> str:
    return "| " + " | ".join(cells) + " |"


def _table(match: re.Match[str]) -> str:
    """Convert one ``<table>`` element into a pipe table.

    The header comes from the first row's ``<th>`` cells; without them,
    ``Column N`` headers are synthesised from the first row's cell count.
    Rows carrying no ``<td>`` cells (such as the header row) produce no
    data line.
    """
    soup = BeautifulSoup(match.group(0), "lxml")
    rows = soup.find_all("tr")
    if not rows:
        return ""

    lines: list[str] = []

    header = [_cell_text(cell) for cell in rows[0].find_all("th", recursive=False)]
    if not header:
        first_row = rows[0].find_all("td", recursive=False)
        header = [f"Column {i}" for i in range(1, len(first_row) + 1)]

    if header:
        lines.append(_table_row(header))
        lines.append(_table_row(["---"] * len(header)))

    for row in rows:
        cells = row.find_all("td", recursive=False)
        if cells:
            lines.append(_table_row([_cell_text(cell) for cell in cells]))

    return "\n".join(lines) + "\n\n"


# Same references html.unescape decodes, including legacy names without ";"
ENTITIES = _rule(
    "entities", r"&(?:#[0-9]+;?|#x[0-9a-f]+;?|[^\t\n\f <&#;]{1,32};?)", _decode_entity
)

HEADINGS = tuple(
    _rule(f"h{level}", _element(f"h{level}"), "#" * level + r" \1\n\n")
    for level in range(1, 5)
)

PARAGRAPH = _rule("paragraph", _element("p"), r"\1\n\n")
BOLD = _rule("bold", r"<(b|strong)\b[^>]*>(.*?)</\1\s*>", r"**\2**")
ITALIC = _rule("italic", r"<(i|em)\b[^>]*>(.*?)</\1\s*>", r"*\2*")
LINK = _rule(
    "link",
    # Anchor text stops at the next opening or closing anchor tag
    r"""<a\b[^>]*?\shref\s*=\s*(["'])([^"'>]*)\1[^>]*>((?:(?!</?a\b).)*?)</a\s*>""",
    r"[\3](\2)",
)
UNORDERED_LIST = _rule("unordered_list", _element("ul"), _list_items("-"))
ORDERED_LIST = _rule("ordered_list", _element("ol"), _list_items("1."))
LIST_ITEM = _rule("list_item", _element("li"), r"- \1\n")
IMAGE = _rule("image", r"<img\b[^>]*>", _image)
TABLE = _rule("table", _element("table"), _table)
PREFORMATTED = _rule("preformatted", _element("pre"), "```\n\\1\n```\n\n")
INLINE_CODE = _rule("inline_code", _element("code"), r"`\1`")
BLOCKQUOTE = _rule("blockquote", _element("blockquote"), r"> \1\n\n")
HORIZONTAL_RULE = _rule("horizontal_rule", r"<hr\b[^>]*>", "---\n\n")
WRAPPERS = _rule("wrappers", r"<(div|span)\b[^>]*>(.*?)</\1\s*>", r"\2", repeat=True)
LINE_BREAK = _rule("line_break", r"<br\b[^>]*>", "\n")
ANY_TAG = _rule("any_tag", r"<[^>]*>", "")
BLANK_LINES = _rule("blank_lines", r"\n{3,}", "\n\n")

# Order matters: later rules see the output of earlier ones.
RULES: tuple[Rule, ...] = (
    ENTITIES,
    *HEADINGS,
    PARAGRAPH,
    BOLD,
    ITALIC,
    LINK,
    UNORDERED_LIST,
    ORDERED_LIST,
    LIST_ITEM,
    IMAGE,
    TABLE,
    PREFORMATTED,
    INLINE_CODE,
    BLOCKQUOTE,
    HORIZONTAL_RULE,
    WRAPPERS,
    LINE_BREAK,
    ANY_TAG,
    BLANK_LINES,
)


def html_to_markdown(content: str, rules: Sequence[Rule] = RULES) -> str:
    """Convert an HTML fragment to Markdown.

    Never raises for string input; markup that no rule recognises is
    stripped and its text kept.

    Args:
        content: The HTML fragment to convert
        rules: Rule cascade to apply (default: RULES)

    Returns:
        Markdown text with surrounding whitespace trimmed and runs of
        blank lines collapsed
    """
    if not content:
        return ""

    for rule in rules:
        content = rule.apply(content)

    return BLANK_LINES.apply(content.strip())
