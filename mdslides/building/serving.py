"""Serve the generated deck and tell open pages when a newer version exists."""

from logging import getLogger
from pathlib import Path
from threading import Lock, Thread
from time import sleep, time_ns

from fastapi import FastAPI
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException
from starlette.responses import Response
from starlette.types import Scope

from ..exceptions import MdslidesError

CHECK_UPDATE_PATH = "/check-update"
ASSET_SUFFIXES = frozenset(
    [".png", ".jpg", ".jpeg", ".gif", ".svg", ".webp", ".ico", ".css", ".js", ".woff2"]
)

_logger = getLogger(__name__)


class ReloadState:
    """Last-regeneration timestamp, in milliseconds, shared with polling clients.

    Timestamps handed out by `next_timestamp` are strictly increasing, so a client \
    always sees a greater value after a regeneration even within the same millisecond.
    """

    def __init__(self) -> None:
        self._lock = Lock()
        self._modified = 0

    @property
    def modified(self) -> int:
        with self._lock:
            return self._modified

    def next_timestamp(self) -> int:
        with self._lock:
            return max(self._modified + 1, time_ns() // 1_000_000)

    def publish(self, modified: int) -> None:
        """Announce a regeneration. Call only once the output has been written."""
        with self._lock:
            self._modified = max(self._modified, modified)


class _AssetFiles(StaticFiles):
    """Serve only the images and web assets found next to the deck."""

    async def get_response(self, path: str, scope: Scope) -> Response:
        if Path(path).suffix.lower() not in ASSET_SUFFIXES:
            raise HTTPException(status_code=404)
        return await super().get_response(path, scope)


def create_app(state: ReloadState, output: Path) -> FastAPI:
    app = FastAPI(title="mdslides reload server", docs_url=None, redoc_url=None)

    @app.get(CHECK_UPDATE_PATH)
    def check_update() -> JSONResponse:
        return JSONResponse(
            {"modified": state.modified},
            headers={
                "Access-Control-Allow-Origin": "*",
                "Cache-Control": "no-store",
            },
        )

    @app.get("/", include_in_schema=False)
    def deck() -> FileResponse:
        return FileResponse(output, media_type="text/html")

    app.mount("/", _AssetFiles(directory=output.parent), name="assets")
    return app


class ReloadServer:
    """Run the reload application with uvicorn in a background thread."""

    def __init__(self, app: FastAPI, host: str, port: int) -> None:
        import uvicorn

        self._host = host
        self._port = port
        self._server = uvicorn.Server(
            uvicorn.Config(
                app,
                host=host,
                port=port,
                log_level="warning",
                timeout_graceful_shutdown=1,
            )
        )
        self._thread: Thread | None = None

    @property
    def url(self) -> str:
        return f"http://{self._host}:{self._port}"

    @property
    def is_alive(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        """Start serving and wait until the port is bound.

        Raises:
            MdslidesError: Raised if the server stopped before being ready, for \
                instance because the port is already in use.
        """
        self._thread = Thread(target=self._server.run, name="reload-server")
        self._thread.start()
        while not self._server.started:
            if not self._thread.is_alive():
                msg = f"could not start reload server on {self.url}"
                raise MdslidesError(msg)
            sleep(0.05)
        _logger.info(f"Reload server running on {self.url}")

    def stop(self) -> None:
        """Stop serving and wait until the port is released."""
        self._server.should_exit = True
        if self._thread is not None:
            self._thread.join()
            self._thread = None
