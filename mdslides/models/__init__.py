"""Modules containing model classes for the different stages of mdslides.

- [`slides`][mdslides.models.slides] contains the slide records produced by the \
    parser
- [`layouts`][mdslides.models.layouts] contains the presentation decisions derived \
    from a slide and fed to the renderer
"""

from .layouts import (
    BulletedList,
    BulletItem,
    ListLayout,
    RankedItem,
    RankedList,
    SlideLayout,
    StatCard,
)
from .slides import (
    Code,
    ContentBlock,
    Image,
    ListItem,
    Slide,
    SlideKind,
    Stat,
    Subtitle,
    Text,
)

__all__ = [
    "BulletItem",
    "BulletedList",
    "Code",
    "ContentBlock",
    "Image",
    "ListItem",
    "ListLayout",
    "RankedItem",
    "RankedList",
    "Slide",
    "SlideKind",
    "SlideLayout",
    "Stat",
    "StatCard",
    "Subtitle",
    "Text",
]
