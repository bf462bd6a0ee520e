from pathlib import Path

from . import app


@app.command()
def build(
    *,
    source: Path | None = None,
    output: Path | None = None,
    workdir: Path = Path(),
) -> None:
    """Generate the HTML deck once.

    Args:
        source: Markdown file to read, relative to WORKDIR
        output: HTML file to write, relative to WORKDIR
        workdir: Path to move into before running the command

    """
    from ..configuring.settings import Settings
    from ..pipelines import build

    build(Settings.from_yaml(workdir, source=source, output=output))
