from collections.abc import Sequence
from functools import cached_property

from jinja2 import Environment, PackageLoader, StrictUndefined

from .. import app_name
from ..models import Code, Slide
from .layout import TERMINAL_LANGUAGE, select_layout

PROMPT = "$"

_html_escapes = str.maketrans(
    {"&": "&amp;", "<": "&lt;", ">": "&gt;", '"': "&quot;", "'": "&#039;"}
)


def escape_html(text: str) -> str:
    return text.translate(_html_escapes)


def code_html(code: Code) -> str:
    """Escape the text of a code block, emphasizing prompts in terminal output."""
    escaped = escape_html(code.text)
    if code.language != TERMINAL_LANGUAGE:
        return escaped
    return "\n".join(
        f'<span class="terminal-prompt">{line}</span>'
        if line.startswith(PROMPT)
        else line
        for line in escaped.split("\n")
    )


class Renderer:
    """Render slides into HTML fragments and wrap them into a full document.

    Rendering has no side effects: writing the document somewhere is up to the caller.
    """

    def __init__(
        self,
        *,
        title: str = "Slides",
        logo: str = "favicon.png",
        lang: str = "en",
        check_update_url: str = "/check-update",
    ) -> None:
        self._title = title
        self._logo = logo
        self._lang = lang
        self._check_update_url = check_update_url

    def render_slide(self, slide: Slide, position: int, total: int) -> str:
        """Render one slide.

        Args:
            slide: Slide to render.
            position: 1-based position of the slide in the deck.
            total: Number of slides in the deck.

        Returns:
            The HTML fragment of the slide.
        """
        return self._env.get_template("slide.html.jinja").render(
            slide=slide,
            layout=select_layout(slide),
            position=position,
            total=total,
            logo=self._logo,
        )

    def render_slides(self, slides: Sequence[Slide]) -> list[str]:
        return [
            self.render_slide(slide, position, len(slides))
            for position, slide in enumerate(slides, start=1)
        ]

    def render(self, slides: Sequence[Slide], *, modified: int = 0) -> str:
        """Render a whole document.

        Args:
            slides: Slides to render, in display order.
            modified: Generation timestamp in milliseconds, used by the page to detect \
                newer versions served by the reload server.

        Returns:
            The complete HTML document.
        """
        return self._env.get_template("deck.html.jinja").render(
            fragments=self.render_slides(slides),
            title=self._title,
            lang=self._lang,
            modified=modified,
            check_update_url=self._check_update_url,
        )

    @cached_property
    def _env(self) -> Environment:
        env = Environment(
            loader=PackageLoader(app_name, "templates"),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
            autoescape=False,
        )
        env.filters["code_html"] = code_html
        return env


def render(slides: Sequence[Slide]) -> str:
    return Renderer().render(slides)
