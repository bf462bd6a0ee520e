"""Classify single lines of a markdown source.

Classification is pure: it only looks at the line and at whether a fenced block is \
currently open. The parser is responsible for threading that state between lines.
"""

from dataclasses import dataclass
from re import compile as re_compile

from ..models import ContentBlock, Image, ListItem, SlideKind, Stat, Subtitle, Text

FENCE = "```"
IGNORED_PREFIXES = ("slides:", "Also share with")
SLIDE_BREAKS = frozenset(["---", "<hr>"])

_title_header = re_compile(r"^#\s+")
_section_header = re_compile(r"^##\s+")
_subtitle_header = re_compile(r"^###\s+")
_image = re_compile(r"!\[([^\]]*)\]\(([^)]+)\)")
_whitespace = re_compile(r"\s")
_digit = re_compile(r"\d")


@dataclass(frozen=True)
class FenceOpen:
    language: str


@dataclass(frozen=True)
class FenceClose:
    pass


@dataclass(frozen=True)
class CodeLine:
    text: str


@dataclass(frozen=True)
class Ignored:
    pass


@dataclass(frozen=True)
class Blank:
    pass


@dataclass(frozen=True)
class Break:
    pass


@dataclass(frozen=True)
class Header:
    kind: SlideKind
    title: str


@dataclass(frozen=True)
class Content:
    block: ContentBlock


ClassifiedLine = (
    FenceOpen | FenceClose | CodeLine | Ignored | Blank | Break | Header | Content
)
"""Alias to any result of [`classify`][mdslides.components.classifier.classify]."""


def classify(line: str, in_code_block: bool) -> ClassifiedLine:
    """Return the semantic kind of a line and its payload.

    Rules are checked in a fixed precedence order and the first match wins. Inside a \
    fenced block, only the closing fence is recognized.

    Args:
        line: Line to classify, without its trailing newline.
        in_code_block: Whether a fenced block is open before this line.

    Returns:
        The classified line.
    """
    if line.startswith(FENCE):
        if in_code_block:
            return FenceClose()
        return FenceOpen(language=line[len(FENCE) :].strip())
    if in_code_block:
        return CodeLine(text=line)
    if line.startswith(IGNORED_PREFIXES):
        return Ignored()
    if line.strip() in SLIDE_BREAKS:
        return Break()
    if _title_header.match(line):
        return Header(kind=SlideKind.TITLE, title=_title_header.sub("", line).strip())
    if _section_header.match(line):
        return Header(
            kind=SlideKind.SECTION, title=_section_header.sub("", line).strip()
        )
    if _subtitle_header.match(line):
        return Content(Subtitle(text=_subtitle_header.sub("", line).strip()))
    if line.startswith("- "):
        return Content(ListItem(text=line[2:].strip()))
    stat = parse_stat(line)
    if stat is not None:
        return Content(stat)
    if match := _image.search(line):
        return Content(Image(alt=match[1], src=match[2]))
    if line.strip():
        return Content(Text(text=line.strip()))
    return Blank()


def parse_stat(line: str) -> Stat | None:
    """Parse a `key: value` line into a stat if it looks like one.

    The key is the text before the first colon and must be non-empty without any \
    whitespace. The value must be non-empty and contain a digit. Lines starting with \
    `http` never qualify, so that links are left alone.

    Args:
        line: Line to parse.

    Returns:
        The stat, or None if the line should be treated as something else.
    """
    if ":" not in line or line.startswith("http"):
        return None
    key, _, value = line.partition(":")
    key = key.strip()
    value = value.strip()
    if not key or _whitespace.search(key) or not value or not _digit.search(value):
        return None
    return Stat(key=key, value=value)
