"""Decide how the content of a slide is displayed."""

from re import compile as re_compile

from ..models import (
    BulletedList,
    BulletItem,
    Code,
    Image,
    ListItem,
    ListLayout,
    RankedItem,
    RankedList,
    Slide,
    SlideKind,
    SlideLayout,
    Stat,
    StatCard,
    Subtitle,
    Text,
)

EM_DASH = "—"
WARNING_MARKER = "pop quiz warning"
TERMINAL_LANGUAGE = "terminal"
MAX_RANKED_ITEMS = 6

_link = re_compile(r"\[([^\]]+)\]\(([^)]+)\)")
_number = re_compile(r"(?:\d{1,3}(?:,\d{3})+|\d+)(?:\.\d+)?")
_percentage = re_compile(r"\(([^()]*%)\)")
_digit = re_compile(r"\d")


def select_layout(slide: Slide) -> SlideLayout:
    """Group the blocks of a slide by category and pick a layout for each of them.

    Args:
        slide: Slide to lay out.

    Returns:
        The layout, with each category in the insertion order of its blocks.
    """
    blocks = slide.blocks
    subtitles = tuple(b for b in blocks if isinstance(b, Subtitle))
    list_items = tuple(b for b in blocks if isinstance(b, ListItem))
    stats = tuple(b for b in blocks if isinstance(b, Stat))
    images = tuple(b for b in blocks if isinstance(b, Image))
    codes = tuple(b for b in blocks if isinstance(b, Code))
    texts = tuple(b for b in blocks if isinstance(b, Text))
    return SlideLayout(
        intro=slide.kind is SlideKind.TITLE,
        warning=is_warning(slide),
        terminal=is_terminal(slide),
        divider=slide.kind is SlideKind.TITLE and bool(texts),
        subtitles=subtitles,
        stat_cards=tuple(stat_card(stat) for stat in stats),
        list_layout=list_layout(list_items),
        texts=texts,
        codes=codes,
        images=images,
    )


def is_warning(slide: Slide) -> bool:
    return slide.title is not None and WARNING_MARKER in slide.title.lower()


def is_terminal(slide: Slide) -> bool:
    return not slide.title and any(
        isinstance(b, Code) and b.language == TERMINAL_LANGUAGE for b in slide.blocks
    )


def is_ranked(items: tuple[ListItem, ...]) -> bool:
    """Tell whether list items look like `name — metric` entries worth a grid."""
    return (
        0 < len(items) <= MAX_RANKED_ITEMS
        and all(EM_DASH in item.text and _digit.search(item.text) for item in items)
    )


def list_layout(items: tuple[ListItem, ...]) -> ListLayout | None:
    if not items:
        return None
    if is_ranked(items):
        return RankedList(items=tuple(ranked_item(item) for item in items))
    return BulletedList(items=tuple(bullet_item(item) for item in items))


def stat_card(stat: Stat) -> StatCard:
    """Split a stat value into its main value and an optional percentage.

    `12,000 (45.2%)` gives a main value of `12,000` and a percentage of `45.2%`.
    """
    value = stat.value
    label = stat.key.replace("_", " ")
    if "(" in value and "%)" in value:
        match = _percentage.search(value)
        return StatCard(
            label=label,
            main_value=value.split("(")[0].strip(),
            percentage=match[1] if match else None,
        )
    return StatCard(label=label, main_value=value)


def ranked_item(item: ListItem) -> RankedItem:
    name, _, stats = item.text.partition(EM_DASH)
    name = name.strip()
    stats = _number.sub(lambda m: f"<strong>{m[0]}</strong>", stats.strip())
    if link := _link.fullmatch(name):
        return RankedItem(name=link[1], stats=stats, href=link[2])
    return RankedItem(name=name, stats=stats)


def bullet_item(item: ListItem) -> BulletItem:
    text = item.text
    label, dash, rest = text.partition(EM_DASH)
    if dash and label.strip():
        text = f'<span class="highlight">{label.strip()}</span> {EM_DASH}{rest}'
    text = _link.sub(lambda m: f'<span class="highlight">{m[1]}</span>', text)
    return BulletItem(html=text)
