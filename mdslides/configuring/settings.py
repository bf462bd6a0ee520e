from collections.abc import Iterable, Iterator
from functools import reduce
from pathlib import Path
from typing import Annotated, Any, Self

from appdirs import user_config_dir as appdirs_user_config_dir
from pydantic import AfterValidator, BaseModel, Field, ValidationError, model_validator
from yaml import YAMLError

from .. import app_name
from ..exceptions import MdslidesError
from ..utils import load_all_yamls

settings_file_name = f"{app_name}.yml"

_Path = Annotated[Path, AfterValidator(Path.expanduser)]


def _user_config_dir() -> Path:
    return Path(appdirs_user_config_dir(app_name)).resolve()


def _load_settings_files(paths: Iterable[Path]) -> Iterator[dict[str, Any]]:
    for path in paths:
        try:
            content = next(load_all_yamls([path]), None)
        except YAMLError as e:
            msg = f"could not parse {path}:\n{e}"
            raise MdslidesError(msg) from e
        if content is None:
            continue
        if not isinstance(content, dict):
            msg = f"{path} should contain a mapping of settings"
            raise MdslidesError(msg)
        yield content


class Settings(BaseModel):
    current_dir: _Path = Field(default_factory=Path)
    source: _Path = Path("text.md")
    output: _Path = Path("index.html")
    title: str = "Slides"
    logo: str = "favicon.png"
    lang: str = "en"
    host: str = "127.0.0.1"
    port: int = Field(default=3456, ge=1, le=65535)
    poll_interval: float = Field(default=0.5, gt=0)
    restart_on_change: bool = True

    @model_validator(mode="after")
    def _resolve_paths(self) -> Self:
        self.current_dir = self.current_dir.resolve()
        self.source = (self.current_dir / self.source).resolve()
        self.output = (self.current_dir / self.output).resolve()
        return self

    @classmethod
    def from_yaml(cls, workdir: Path, **overrides: Any) -> Self:
        """Load settings for a working directory.

        Settings files are looked up in the user config directory, then in the \
        working directory. Later files win, and non-None overrides win over files.

        Args:
            workdir: Working directory. Relative paths are resolved against it.
            overrides: Values taking precedence over the settings files.

        Raises:
            MdslidesError: Raised if a settings file cannot be parsed or if the merged \
                settings are invalid.

        Returns:
            The merged settings.
        """
        resolved_workdir = workdir.resolve()
        content: dict[str, Any] = reduce(
            lambda a, b: {**a, **b},
            _load_settings_files(
                d / settings_file_name for d in (_user_config_dir(), resolved_workdir)
            ),
            {},
        )
        content["current_dir"] = resolved_workdir
        content.update({k: v for k, v in overrides.items() if v is not None})
        try:
            return cls.model_validate(content)
        except ValidationError as e:
            msg = f"invalid settings:\n{e}"
            raise MdslidesError(msg) from e
