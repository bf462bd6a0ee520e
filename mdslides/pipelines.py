from logging import getLogger
from time import time_ns

from .components.parser import parse
from .components.renderer import Renderer
from .configuring.settings import Settings
from .exceptions import OutputWriteError, SourceReadError
from .utils import write_if_changed

_logger = getLogger(__name__)


def renderer_from_settings(settings: Settings) -> Renderer:
    return Renderer(title=settings.title, logo=settings.logo, lang=settings.lang)


def build(settings: Settings, *, modified: int | None = None) -> int:
    """Generate the output document from the source file.

    Args:
        settings: Settings giving the source, the output and the document metadata.
        modified: Generation timestamp in milliseconds embedded in the document. \
            Defaults to the current time.

    Raises:
        SourceReadError: Raised if the source cannot be read.
        OutputWriteError: Raised if the output cannot be written. The previous output \
            is left untouched.

    Returns:
        Number of slides generated.
    """
    try:
        source = settings.source.read_text(encoding="utf8")
    except (OSError, UnicodeDecodeError) as e:
        msg = f"could not read {settings.source}: {e}"
        raise SourceReadError(msg) from e
    slides = parse(source)
    document = renderer_from_settings(settings).render(
        slides, modified=time_ns() // 1_000_000 if modified is None else modified
    )
    try:
        write_if_changed(document, settings.output)
    except OSError as e:
        msg = f"could not write {settings.output}: {e}"
        raise OutputWriteError(msg) from e
    _logger.info(f"Generated {len(slides)} slides in {settings.output}")
    return len(slides)
