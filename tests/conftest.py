from pathlib import Path

from pytest import MonkeyPatch, fixture


@fixture(autouse=True)
def user_config_dir(tmp_path: Path, monkeypatch: MonkeyPatch) -> Path:
    config_dir = tmp_path / "user-config"
    config_dir.mkdir()
    monkeypatch.setattr(
        "mdslides.configuring.settings._user_config_dir", lambda: config_dir
    )
    return config_dir
