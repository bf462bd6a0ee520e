"""Provide general utility functions that would not fit in other modules."""

from collections.abc import Iterable, Iterator
from contextlib import suppress
from pathlib import Path
from typing import Any


def load_yaml(path: Path) -> Any:
    from yaml import safe_load

    return safe_load(path.read_text(encoding="utf8"))


def load_all_yamls(paths: Iterable[Path]) -> Iterator[Any]:
    for path in paths:
        with suppress(FileNotFoundError):
            yield load_yaml(path)


def write_if_changed(content: str, output_path: Path) -> bool:
    """Atomically replace `output_path` with `content` if it differs.

    The content is first written to a temporary file next to the output, which is \
    then moved into place. A failure at any point leaves the previous output untouched.

    Args:
        content: Text to write.
        output_path: Destination of the text.

    Returns:
        True if the output was replaced, False if it already had this content.
    """
    from filecmp import cmp
    from shutil import move
    from tempfile import NamedTemporaryFile

    fh = NamedTemporaryFile("w", encoding="utf8", dir=output_path.parent, delete=False)
    try:
        with fh:
            fh.write(content)
        if output_path.exists() and cmp(fh.name, str(output_path), shallow=False):
            return False
        move(fh.name, output_path)
        return True
    finally:
        with suppress(FileNotFoundError):
            Path(fh.name).unlink()


def import_module_and_submodules(package_name: str) -> None:
    """Import all modules and submodules from a package.

    From https://github.com/allenai/allennlp/blob/master/allennlp/common/util.py.

    Args:
        package_name: Name of the package to fully import.
    """
    from importlib import import_module
    from pkgutil import walk_packages

    module = import_module(package_name)
    path = getattr(module, "__path__", [])
    for _, name, _ in walk_packages(path):
        import_module_and_submodules(f"{package_name}.{name}")
