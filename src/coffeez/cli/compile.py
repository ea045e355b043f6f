from pathlib import Path

from . import app


@app.command()
def compile(  # noqa: A001
    paths: list[Path] | None = None,
    /,
    *,
    workdir: Path = Path(),
) -> None:
    """Compile CoffeeScript files into the output directory.

    Args:
        paths: Files and directories to compile. Defaults to WORKDIR
        workdir: Path to move into before running the command

    """
    from ..configuring.settings import Settings
    from ..exceptions import CompilationFailedError
    from ..pipelines import run

    if not run(Settings.from_yaml(workdir), paths):
        msg = "some files could not be compiled"
        raise CompilationFailedError(msg)
