"""Provide general utility functions that would not fit in other modules."""

from collections.abc import Iterable, Iterator
from contextlib import suppress
from pathlib import Path
from typing import Any


def import_module_and_submodules(package_name: str) -> None:
    """Import all modules and submodules from a package.

    From https://github.com/allenai/allennlp/blob/master/allennlp/common/util.py.

    Args:
        package_name: Name of the package to fully import.
    """
    from importlib import import_module
    from importlib import invalidate_caches as importlib_invalidate_caches
    from pkgutil import walk_packages
    from sys import modules

    importlib_invalidate_caches()

    module = modules.get(package_name) or import_module(package_name)
    path = getattr(module, "__path__", [])
    path_string = "" if not path else path[0]

    for module_finder, name, _ in walk_packages(path):
        if (
            path_string
            and hasattr(module_finder, "path")
            and module_finder.path != path_string
        ):
            continue
        subpackage = f"{package_name}.{name}"
        import_module_and_submodules(subpackage)


def load_yaml(path: Path) -> Any:
    from yaml import safe_load

    return safe_load(path.read_text(encoding="utf8"))


def load_all_yamls(paths: Iterable[Path]) -> Iterator[Any]:
    for path in paths:
        with suppress(FileNotFoundError):
            yield load_yaml(path)


def write_if_changed(path: Path, content: str) -> bool:
    """Write `content` to `path` unless the file already holds exactly that content.

    Args:
        path: Destination. Its parent directories are created if needed.
        content: Text to write.

    Returns:
        True if the file was written, False if it was already up to date.
    """
    if path.is_file() and path.read_text(encoding="utf8") == content:
        return False
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf8")
    return True


def source_files(paths: Iterable[Path], extension: str) -> Iterator[tuple[Path, Path]]:
    """Yield the source files found in `paths`, along with the root they come from.

    Directories are searched recursively for files ending with `extension`, files are \
    yielded as is.

    Args:
        paths: Files and directories to search.
        extension: Extension of the files to look for in directories.

    Yields:
        Pairs made of a source file and the directory its output should be relative to.
    """
    for path in paths:
        resolved = path.resolve()
        if resolved.is_dir():
            for file in sorted(resolved.rglob(f"*{extension}")):
                yield file, resolved
        else:
            yield resolved, resolved.parent
