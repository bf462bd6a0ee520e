from collections.abc import Callable
from logging import getLogger
from os import fsdecode
from pathlib import Path
from threading import Event, Lock

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers.polling import PollingObserver

from .. import app_name
from ..configuring.settings import Settings
from ..exceptions import MdslidesError
from ..pipelines import build
from .serving import ReloadServer, ReloadState, create_app

_logger = getLogger(__name__)

package_dir = Path(__file__).resolve().parent.parent


def _event_paths(event: FileSystemEvent) -> set[Path]:
    paths = {Path(fsdecode(event.src_path)).resolve()}
    if dest_path := getattr(event, "dest_path", None):
        paths.add(Path(fsdecode(dest_path)).resolve())
    return paths


class _Regenerator:
    """Rebuild the deck, one pass at a time, and announce successful passes."""

    def __init__(self, settings: Settings, state: ReloadState) -> None:
        self._settings = settings
        self._state = state
        self._lock = Lock()
        self._first_build = True

    def __call__(self) -> bool:
        with self._lock:
            if self._first_build:
                self._first_build = False
                _logger.info("Initial build")
            else:
                _logger.info("Detected changes, regenerating")
            modified = self._state.next_timestamp()
            try:
                build(self._settings, modified=modified)
            except MdslidesError as e:
                _logger.error(str(e))
                return False
            except Exception as e:
                _logger.exception(str(e))
                return False
            self._state.publish(modified)
            return True


class _FileEventHandler(FileSystemEventHandler):
    def __init__(self, path: Path, function: Callable[[], object]) -> None:
        self._path = path.resolve()
        self._function = function

    def dispatch(self, event: FileSystemEvent) -> None:
        if not event.is_directory and self._path in _event_paths(event):
            self._function()


class _CodeEventHandler(FileSystemEventHandler):
    def __init__(self, restart_requested: Event) -> None:
        self._restart_requested = restart_requested

    def dispatch(self, event: FileSystemEvent) -> None:
        if not event.is_directory and any(
            p.suffix == ".py" for p in _event_paths(event)
        ):
            _logger.info("Generator code changed, restarting")
            self._restart_requested.set()


def watch(settings: Settings) -> bool:
    """Regenerate the deck whenever its source changes and serve reload notifications.

    Blocks until interrupted, or until the package code changes when \
    `restart_on_change` is set. In the latter case, the reload server is stopped \
    before returning so that a new process can bind the same port.

    Args:
        settings: Settings of the deck to watch.

    Returns:
        True if a restart was requested, False if watching was interrupted.
    """
    state = ReloadState()
    regenerate = _Regenerator(settings, state)
    restart_requested = Event()
    regenerate()
    server = ReloadServer(
        create_app(state, settings.output), settings.host, settings.port
    )
    observer = PollingObserver(timeout=settings.poll_interval)
    observer.schedule(
        _FileEventHandler(settings.source, regenerate),
        str(settings.source.parent),
        recursive=False,
    )
    if settings.restart_on_change:
        observer.schedule(
            _CodeEventHandler(restart_requested), str(package_dir), recursive=True
        )
    _logger.info(f"Watching {settings.source}")
    observer.start()
    try:
        server.start()
        while not restart_requested.wait(timeout=settings.poll_interval):
            if not observer.is_alive() or not server.is_alive:
                msg = "stopped watching abnormally"
                raise MdslidesError(msg)
    except KeyboardInterrupt:
        _logger.info("Stopped watching")
        return False
    finally:
        observer.stop()
        server.stop()
        observer.join()
    return True


def respawn(args: list[str]) -> None:
    """Start a detached process running mdslides with the given arguments."""
    from subprocess import Popen
    from sys import executable

    Popen([executable, "-m", app_name, *args], start_new_session=True)  # noqa: S603
