"""Turn a markdown source into an ordered sequence of slides.

The parser is a fold over the source lines: each line maps a
[`ParserState`][mdslides.components.parser.ParserState] to the next one. States are \
immutable, which makes every step testable in isolation.
"""

from collections.abc import Iterable
from dataclasses import dataclass, replace
from functools import reduce

from ..models import Code, ContentBlock, Slide, SlideKind
from .classifier import (
    Blank,
    Break,
    CodeLine,
    Content,
    FenceClose,
    FenceOpen,
    Header,
    Ignored,
    classify,
)


@dataclass(frozen=True)
class ParserState:
    """State threaded through the lines.

    `current` is None when no slide is open. The fence fields are orthogonal to it: a \
    fenced block can be open whether a slide is open or not.
    """

    slides: tuple[Slide, ...] = ()
    current: Slide | None = None
    in_code_block: bool = False
    code_language: str = ""
    code_lines: tuple[str, ...] = ()

    def finalize(self) -> "ParserState":
        """Close the current slide, keeping it only if it received content."""
        if self.current is not None and self.current.blocks:
            return replace(self, slides=(*self.slides, self.current), current=None)
        return replace(self, current=None)

    def append(self, block: ContentBlock) -> "ParserState":
        current = self.current or Slide(kind=SlideKind.CONTENT)
        return replace(self, current=current.with_block(block))


def step(state: ParserState, line: str) -> ParserState:
    """Consume one line.

    Args:
        state: State before the line.
        line: Line to consume, without its trailing newline.

    Returns:
        State after the line.
    """
    match classify(line, state.in_code_block):
        case FenceOpen(language=language):
            return replace(
                state, in_code_block=True, code_language=language, code_lines=()
            )
        case FenceClose():
            code = Code(language=state.code_language, text="\n".join(state.code_lines))
            return replace(
                state.append(code), in_code_block=False, code_language="", code_lines=()
            )
        case CodeLine(text=text):
            return replace(state, code_lines=(*state.code_lines, text))
        case Break():
            return state.finalize()
        case Header(kind=kind, title=title):
            return replace(state.finalize(), current=Slide(kind=kind, title=title))
        case Content(block=block):
            return state.append(block)
        case Ignored() | Blank():
            return state
    msg = f"unexpected line classification for {line!r}"
    raise AssertionError(msg)


def parse_lines(lines: Iterable[str]) -> tuple[Slide, ...]:
    return reduce(step, lines, ParserState()).finalize().slides


def parse(source: str) -> tuple[Slide, ...]:
    """Parse a whole markdown source.

    Never fails: every line falls into some category. A fenced block left open at the \
    end of the source is dropped.

    Args:
        source: Markdown text.

    Returns:
        The retained slides, in source order.
    """
    return parse_lines(source.split("\n"))
