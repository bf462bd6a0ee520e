from pathlib import Path

from . import app


@app.command()
def watch(
    *,
    source: Path | None = None,
    output: Path | None = None,
    host: str | None = None,
    port: int | None = None,
    restart: bool | None = None,
    workdir: Path = Path(),
) -> None:
    """Regenerate the deck on change and notify open pages.

    Args:
        source: Markdown file to watch, relative to WORKDIR
        output: HTML file to write, relative to WORKDIR
        host: Host of the reload server
        port: Port of the reload server
        restart: Restart when the mdslides code itself changes
        workdir: Path to move into before running the command

    """
    from sys import argv

    from ..building.watching import respawn, watch
    from ..configuring.settings import Settings

    settings = Settings.from_yaml(
        workdir,
        source=source,
        output=output,
        host=host,
        port=port,
        restart_on_change=restart,
    )
    if watch(settings):
        respawn(argv[1:])
