from collections.abc import Iterable
from logging import getLogger
from pathlib import Path

from rich.progress import BarColumn, Progress

from .building.watching import watch
from .components import Minifier
from .components.factory import SettingsFactory
from .configuring.settings import Settings
from .models import (
    CompilationRequest,
    CompilationResult,
    Failure,
    MinificationRequest,
    Success,
)
from .transformer import SourceTransformer, source_map_name
from .utils import source_files, write_if_changed

__all__ = ["compile_file", "run", "watch", "watched_dirs"]

_logger = getLogger(__name__)


def compile_file(
    path: Path,
    output_dir: Path,
    transformer: SourceTransformer,
    minifier: Minifier | None = None,
) -> CompilationResult:
    """Compile a CoffeeScript file and write its JavaScript and source map.

    `<stem>.js` and `<name>@source.map` are written in `output_dir`, only if their \
    content changed. With a minifier, the minified JavaScript is also written to \
    `<stem>.min.js`. Nothing is written if the compilation or the minification fails.

    Args:
        path: CoffeeScript file.
        output_dir: Directory receiving the outputs. Created if needed.
        transformer: Transformer used to compile the file.
        minifier: Minifier applied to the compiled JavaScript, if any.

    Returns:
        The result of the compilation, or the failure of the minification.
    """
    result = transformer.transform(
        CompilationRequest(
            source_text=path.read_text(encoding="utf8"),
            file_path=str(path),
            display_name=path.name,
        )
    )
    if not isinstance(result, Success):
        return result
    js_path = output_dir / f"{path.stem}.js"
    if minifier is not None:
        minified = minifier.minify(
            MinificationRequest(source_text=result.emitted_code, file_path=str(js_path))
        )
        if isinstance(minified, Failure):
            return minified
        write_if_changed(output_dir / f"{path.stem}.min.js", minified.code)
    if write_if_changed(js_path, result.emitted_code):
        _logger.debug("Wrote %s", js_path)
    write_if_changed(output_dir / source_map_name(path.name), result.source_map)
    return result


def run(settings: Settings, paths: Iterable[Path] | None = None) -> bool:
    """Compile the CoffeeScript files found in `paths` into the output directory.

    Files found in directories keep their position relative to the directory.

    Args:
        settings: Settings of the working directory.
        paths: Files and directories to compile. Defaults to the working directory.

    Returns:
        True if every file compiled.
    """
    factory = SettingsFactory(settings)
    transformer = factory.transformer()
    minifier = factory.minifier()
    files = [
        (file, root)
        for file, root in source_files(
            paths or [settings.current_dir], settings.file_extension
        )
        if not file.is_relative_to(settings.output_dir)
    ]
    if not files:
        _logger.info("No %s file to compile", settings.file_extension)
        return True
    failed = []
    with Progress(
        "[progress.description]{task.description}",
        BarColumn(),
        "[progress.percentage]{task.percentage:>3.0f}%",
    ) as progress:
        task_id = progress.add_task("Compiling…", total=len(files))
        for file, root in files:
            result = compile_file(
                file,
                settings.output_dir / file.parent.relative_to(root),
                transformer,
                minifier,
            )
            if isinstance(result, Failure):
                _logger.warning("Compilation of %s errored\n%s", file, result.message)
                failed.append(file)
            progress.update(task_id, advance=1)
    _logger.info(
        "Compiled %d/%d files into %s",
        len(files) - len(failed),
        len(files),
        settings.output_dir,
    )
    return not failed


def watched_dirs(settings: Settings, paths: Iterable[Path] | None = None) -> set[Path]:
    dirs = set()
    for path in paths or [settings.current_dir]:
        resolved = path.resolve()
        dirs.add(resolved if resolved.is_dir() else resolved.parent)
    return dirs
