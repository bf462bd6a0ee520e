from pathlib import Path

from pytest import raises

from mdslides.configuring.settings import Settings
from mdslides.exceptions import OutputWriteError, SourceReadError
from mdslides.pipelines import build
from mdslides.utils import write_if_changed


def test_build(tmp_path: Path) -> None:
    (tmp_path / "text.md").write_text("# Hello\nWorld\n---\n## Empty\n", encoding="utf8")

    count = build(Settings.from_yaml(tmp_path), modified=99)

    document = (tmp_path / "index.html").read_text(encoding="utf8")
    assert count == 1
    assert "<h1>Hello</h1>" in document
    assert "Empty" not in document
    assert "let lastModified = 99;" in document


def test_missing_source(tmp_path: Path) -> None:
    with raises(SourceReadError):
        build(Settings.from_yaml(tmp_path))
    assert not (tmp_path / "index.html").exists()


def test_unwritable_output(tmp_path: Path) -> None:
    (tmp_path / "text.md").write_text("text\n", encoding="utf8")
    settings = Settings.from_yaml(tmp_path, output=Path("missing/index.html"))

    with raises(OutputWriteError):
        build(settings)


def test_write_if_changed(tmp_path: Path) -> None:
    output = tmp_path / "out.html"

    assert write_if_changed("a", output)
    assert not write_if_changed("a", output)
    assert write_if_changed("b", output)
    assert output.read_text(encoding="utf8") == "b"
    assert [p.name for p in tmp_path.iterdir() if p.name != "user-config"] == [
        "out.html"
    ]
