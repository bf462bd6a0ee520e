from logging import INFO
from pathlib import Path
from socket import SO_REUSEADDR, SOL_SOCKET, socket
from threading import Event, Thread
from time import sleep
from typing import Any

from httpx import ConnectError, get
from watchdog.events import DirModifiedEvent, FileModifiedEvent, FileMovedEvent

from mdslides.building.serving import ReloadState
from mdslides.building.watching import (
    _CodeEventHandler,
    _FileEventHandler,
    _Regenerator,
    watch,
)
from mdslides.configuring.settings import Settings


def test_regenerator_publishes_after_success(tmp_path: Path) -> None:
    (tmp_path / "text.md").write_text("## One\na\n", encoding="utf8")
    state = ReloadState()
    regenerate = _Regenerator(Settings.from_yaml(tmp_path), state)

    assert regenerate()
    first = state.modified
    assert first > 0
    assert f"let lastModified = {first};" in (tmp_path / "index.html").read_text(
        encoding="utf8"
    )

    assert regenerate()
    assert state.modified > first


def test_regenerator_survives_failures(tmp_path: Path) -> None:
    state = ReloadState()
    regenerate = _Regenerator(Settings.from_yaml(tmp_path), state)

    assert not regenerate()
    assert state.modified == 0

    (tmp_path / "text.md").write_text("now it exists\n", encoding="utf8")
    assert regenerate()
    assert state.modified > 0


def test_file_handler_only_reacts_to_source(tmp_path: Path) -> None:
    source = tmp_path / "text.md"
    calls: list[None] = []
    handler = _FileEventHandler(source, lambda: calls.append(None))

    handler.dispatch(FileModifiedEvent(str(tmp_path / "index.html")))
    handler.dispatch(DirModifiedEvent(str(tmp_path)))
    assert calls == []

    handler.dispatch(FileModifiedEvent(str(source)))
    handler.dispatch(FileMovedEvent(str(tmp_path / "text.md~"), str(source)))
    assert len(calls) == 2


def test_code_handler_requests_restart(tmp_path: Path) -> None:
    restart_requested = Event()
    handler = _CodeEventHandler(restart_requested)

    handler.dispatch(FileModifiedEvent(str(tmp_path / "notes.txt")))
    assert not restart_requested.is_set()

    handler.dispatch(FileModifiedEvent(str(tmp_path / "layout.py")))
    assert restart_requested.is_set()


def _free_port() -> int:
    with socket() as free:
        free.bind(("127.0.0.1", 0))
        return free.getsockname()[1]


def _assert_port_released(port: int) -> None:
    with socket() as rebound:
        rebound.setsockopt(SOL_SOCKET, SO_REUSEADDR, 1)
        rebound.bind(("127.0.0.1", port))


def _wait_for_server(url: str) -> None:
    for _ in range(100):
        try:
            get(url, timeout=1)
        except ConnectError:
            sleep(0.05)
        else:
            return
    raise AssertionError(f"no server answering on {url}")


def _watch_settings(tmp_path: Path) -> Settings:
    deck_dir = tmp_path / "deck"
    deck_dir.mkdir()
    (deck_dir / "text.md").write_text("## One\na\n", encoding="utf8")
    return Settings.from_yaml(deck_dir, port=_free_port(), poll_interval=0.1)


def test_watch_restarts_on_code_change(tmp_path: Path, monkeypatch: Any) -> None:
    code_dir = tmp_path / "code"
    code_dir.mkdir()
    monkeypatch.setattr("mdslides.building.watching.package_dir", code_dir)
    settings = _watch_settings(tmp_path)
    results: list[bool] = []
    thread = Thread(target=lambda: results.append(watch(settings)))

    thread.start()
    _wait_for_server(f"http://127.0.0.1:{settings.port}/check-update")
    assert settings.output.is_file()
    sleep(0.3)
    (code_dir / "layout.py").write_text("x = 1\n", encoding="utf8")
    thread.join(timeout=10)

    assert not thread.is_alive()
    assert results == [True]
    _assert_port_released(settings.port)


class _InterruptedEvent(Event):
    def wait(self, timeout: float | None = None) -> bool:
        raise KeyboardInterrupt


def test_watch_stops_on_interrupt(
    tmp_path: Path, monkeypatch: Any, caplog: Any
) -> None:
    caplog.set_level(INFO)
    monkeypatch.setattr("mdslides.building.watching.Event", _InterruptedEvent)
    settings = _watch_settings(tmp_path)

    assert not watch(settings)

    assert "Stopped watching" in caplog.text
    assert settings.output.is_file()
    _assert_port_released(settings.port)
