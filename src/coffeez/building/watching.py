from collections.abc import Callable, Set
from logging import getLogger
from pathlib import Path
from threading import Thread
from time import time
from typing import Any, ParamSpec

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from ..exceptions import CoffeezError

P = ParamSpec("P")
_logger = getLogger(__name__)


class _BaseEventHandler(FileSystemEventHandler):
    def __init__(
        self,
        minimum_delay: float,
        avoid: Set[Path],
        function: Callable[P, Any],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> None:
        self._minimum_delay = minimum_delay
        self._avoid = avoid
        self._function = function
        self._function_args = args
        self._function_kwargs = kwargs
        self._last_build = 0.0
        self._worker: Thread | None = None
        self._first_build = True

    def __call__(self) -> None:
        if self._first_build:
            self._first_build = False
            _logger.info("Initial build")
        else:
            _logger.info("Detected changes, starting a new build")
        try:
            self._function(*self._function_args, **self._function_kwargs)
            _logger.info("Build finished")
        except Exception as e:
            _logger.exception(str(e))

    def dispatch(self, event: FileSystemEvent) -> None:
        src_path = Path(str(event.src_path)).resolve()
        if any(src_path.is_relative_to(avoided) for avoided in self._avoid):
            return
        current_time = time()
        if self._last_build + self._minimum_delay > current_time:
            return
        if self._worker is not None and self._worker.is_alive():
            _logger.info("Still on last build, not starting a new build")
            return
        self._last_build = current_time
        self._worker = Thread(target=self.__call__)
        self._worker.start()


def watch(
    minimum_delay: float,
    watch: Set[Path],
    avoid: Set[Path],
    function: Callable[P, Any],
    *function_args: P.args,
    **function_kwargs: P.kwargs,
) -> None:
    """Call `function` once, then again each time something changes in `watch`.

    Args:
        minimum_delay: Minimum number of seconds between two calls.
        watch: Directories to watch recursively.
        avoid: Directories whose changes are ignored, typically the output directory.
        function: Function to call.
        function_args: Positional arguments of `function`.
        function_kwargs: Keyword arguments of `function`.

    Raises:
        CoffeezError: Raised if the observer stops without being interrupted.
    """
    resolved_avoid = frozenset(p.resolve() for p in avoid)
    event_handler = _BaseEventHandler(
        minimum_delay, resolved_avoid, function, *function_args, **function_kwargs
    )
    observer = Observer()
    for dir_to_watch in watch:
        observer.schedule(event_handler, str(dir_to_watch.resolve()), recursive=True)
    event_handler()
    observer.start()
    try:
        observer.join()
    except KeyboardInterrupt:
        observer.stop()
        observer.join()
        _logger.info("Stopped watching")
    else:
        msg = "stopped watching abnormally"
        raise CoffeezError(msg)
