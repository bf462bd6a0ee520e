"""Model classes produced by the parser and consumed by the layout selector."""

from dataclasses import dataclass, field
from enum import Enum


class SlideKind(Enum):
    """Kind of a slide, determined by the line that opened it."""

    TITLE = "title"
    SECTION = "section"
    CONTENT = "content"


@dataclass(frozen=True)
class Subtitle:
    text: str


@dataclass(frozen=True)
class ListItem:
    text: str


@dataclass(frozen=True)
class Stat:
    """Key/value pair meant to be displayed as a highlighted number."""

    key: str
    value: str


@dataclass(frozen=True)
class Image:
    alt: str
    src: str


@dataclass(frozen=True)
class Code:
    """Verbatim body of one fenced block."""

    language: str
    """Token following the opening fence, possibly empty."""

    text: str
    """Lines of the block joined with newlines, uninterpreted."""


@dataclass(frozen=True)
class Text:
    text: str


ContentBlock = Subtitle | ListItem | Stat | Image | Code | Text
"""Alias to any typed unit of body content within a slide."""


@dataclass(frozen=True)
class Slide:
    """One screen of output.

    Blocks are kept in insertion order. The title is only set for title and section \
    slides.
    """

    kind: SlideKind
    title: str | None = None
    blocks: tuple[ContentBlock, ...] = field(default_factory=tuple)

    def with_block(self, block: ContentBlock) -> "Slide":
        return Slide(kind=self.kind, title=self.title, blocks=(*self.blocks, block))
