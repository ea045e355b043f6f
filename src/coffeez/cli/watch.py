from pathlib import Path

from . import app


@app.command()
def watch(
    paths: list[Path] | None = None,
    /,
    *,
    minimum_delay: float = 1.0,
    workdir: Path = Path(),
) -> None:
    """Compile CoffeeScript files on change.

    Args:
        paths: Files and directories to compile. Defaults to WORKDIR
        minimum_delay: Minimum number of seconds between two builds
        workdir: Path to move into before running the command

    """
    from logging import getLogger

    from ..configuring.settings import Settings
    from ..pipelines import run, watch, watched_dirs

    logger = getLogger(__name__)

    settings = Settings.from_yaml(workdir)
    to_watch = watched_dirs(settings, paths)
    logger.info("Watching %s", ", ".join(str(d) for d in sorted(to_watch)))
    watch(
        minimum_delay,
        frozenset(to_watch),
        frozenset([settings.output_dir]),
        run,
        settings=settings,
        paths=paths,
    )
