"""Model classes describing how a slide is displayed.

These are derived from a [`Slide`][mdslides.models.slides.Slide] by the layout \
selector and never persisted. The list layout is a closed set of variants, each one \
rendered by its own template partial.
"""

from dataclasses import dataclass
from typing import Literal

from .slides import Code, Image, Subtitle, Text


@dataclass(frozen=True)
class StatCard:
    label: str
    """Stat key with underscores turned into spaces."""

    main_value: str

    percentage: str | None = None
    """Percentage found between parentheses in the value, without them."""


@dataclass(frozen=True)
class RankedItem:
    name: str
    stats: str
    """Stats part with every number already wrapped for emphasis."""

    href: str | None = None


@dataclass(frozen=True)
class RankedList:
    items: tuple[RankedItem, ...]
    kind: Literal["ranked"] = "ranked"


@dataclass(frozen=True)
class BulletItem:
    html: str


@dataclass(frozen=True)
class BulletedList:
    items: tuple[BulletItem, ...]
    kind: Literal["bulleted"] = "bulleted"


ListLayout = RankedList | BulletedList
"""Alias to any of the list layout variants."""


@dataclass(frozen=True)
class SlideLayout:
    """Style flags and grouped content of one slide, ready to be rendered."""

    intro: bool
    warning: bool
    terminal: bool
    divider: bool
    subtitles: tuple[Subtitle, ...]
    stat_cards: tuple[StatCard, ...]
    list_layout: ListLayout | None
    texts: tuple[Text, ...]
    codes: tuple[Code, ...]
    images: tuple[Image, ...]

    @property
    def css_classes(self) -> str:
        classes = ["slide"]
        if self.intro:
            classes.append("intro-slide")
        if self.warning:
            classes.append("pop-quiz-warning")
        if self.terminal:
            classes.append("terminal-slide")
        return " ".join(classes)
