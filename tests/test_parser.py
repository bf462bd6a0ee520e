from mdslides.components.parser import ParserState, parse, step
from mdslides.models import Code, Image, ListItem, Slide, SlideKind, Stat, Subtitle, Text


def test_end_to_end_scenario() -> None:
    slides = parse("# Title\nIntro text\n\n---\n\n## Stats\npackages: 100\nusers: 50\n")

    assert slides == (
        Slide(kind=SlideKind.TITLE, title="Title", blocks=(Text(text="Intro text"),)),
        Slide(
            kind=SlideKind.SECTION,
            title="Stats",
            blocks=(
                Stat(key="packages", value="100"),
                Stat(key="users", value="50"),
            ),
        ),
    )


def test_header_without_content_is_dropped() -> None:
    slides = parse("# Lost title\n## Kept\n- item\n")

    assert slides == (
        Slide(kind=SlideKind.SECTION, title="Kept", blocks=(ListItem(text="item"),)),
    )


def test_trailing_header_without_content_is_dropped() -> None:
    assert parse("Some text\n## Nothing after") == (
        Slide(kind=SlideKind.CONTENT, blocks=(Text(text="Some text"),)),
    )


def test_content_after_break_opens_untitled_slide() -> None:
    slides = parse("# Title\nintro\n<hr>\n### Sub\n![alt](img.png)\n")

    assert len(slides) == 2
    assert slides[1] == Slide(
        kind=SlideKind.CONTENT,
        title=None,
        blocks=(Subtitle(text="Sub"), Image(alt="alt", src="img.png")),
    )


def test_consecutive_breaks_produce_no_slide() -> None:
    assert parse("---\n---\n\n<hr>\n") == ()


def test_blank_and_ignored_lines() -> None:
    slides = parse("slides: 3\n\n## Section\n\nAlso share with Ana\nBody\n\n")

    assert slides == (
        Slide(kind=SlideKind.SECTION, title="Section", blocks=(Text(text="Body"),)),
    )


def test_fenced_block_is_verbatim() -> None:
    slides = parse("```\n# not a title\n- not an item\nkey: 42\n---\n```\n")

    assert slides == (
        Slide(
            kind=SlideKind.CONTENT,
            blocks=(
                Code(language="", text="# not a title\n- not an item\nkey: 42\n---"),
            ),
        ),
    )


def test_fenced_block_never_yields_markup_blocks() -> None:
    source = "## Code\n```python\n### a\n- b\nc: 1\n# d\n```\n"
    (slide,) = parse(source)

    assert [type(block) for block in slide.blocks] == [Code]
    assert slide.blocks[0] == Code(language="python", text="### a\n- b\nc: 1\n# d")


def test_unclosed_fence_is_dropped() -> None:
    assert parse("## Section\nhello\n```bash\necho hi\n") == (
        Slide(kind=SlideKind.SECTION, title="Section", blocks=(Text(text="hello"),)),
    )


def test_blocks_keep_insertion_order() -> None:
    (slide,) = parse("## Mixed\ntext first\n- item\ncount: 3\n### late subtitle\n")

    assert slide.blocks == (
        Text(text="text first"),
        ListItem(text="item"),
        Stat(key="count", value="3"),
        Subtitle(text="late subtitle"),
    )


def test_step_is_pure() -> None:
    initial = ParserState()
    opened = step(initial, "# Title")

    assert initial == ParserState()
    assert opened.current == Slide(kind=SlideKind.TITLE, title="Title")
    assert step(opened, "---") == ParserState()


def test_step_tracks_fence_state() -> None:
    state = step(ParserState(), "```terminal")
    state = step(state, "$ ls")

    assert state.in_code_block
    assert state.code_language == "terminal"
    assert state.code_lines == ("$ ls",)

    state = step(state, "```")

    assert not state.in_code_block
    assert state.current == Slide(
        kind=SlideKind.CONTENT, blocks=(Code(language="terminal", text="$ ls"),)
    )


def test_parse_is_deterministic() -> None:
    source = "# A\nx\n## B\n- 1 — 2\n```\ncode\n```\n"

    assert parse(source) == parse(source)
