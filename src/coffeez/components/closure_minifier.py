from collections.abc import Iterable
from json import dumps
from subprocess import run

from pydantic import BaseModel

from ..exceptions import CompilerError
from ..models import CompilationLevel
from . import Minifier


class ClosureMinifierExtraKwArgs(BaseModel):
    java: tuple[str, ...] = ("java",)
    level: CompilationLevel = CompilationLevel.Simple


class ClosureMinifier(
    Minifier, key="closure", extra_kwargs_class=ClosureMinifierExtraKwArgs
):
    """Run the Closure Compiler jar shipped by the `closure` distribution."""

    def __init__(
        self,
        java: Iterable[str] = ("java",),
        level: CompilationLevel = CompilationLevel.Simple,
    ) -> None:
        self._java = tuple(java)
        self._level = level

    def _minify(self, source: str, file_path: str) -> str:
        from closure import get_jar_filename

        # JSON input streams attribute diagnostics to the path of the source
        completed_process = run(
            [
                *self._java,
                "-jar",
                get_jar_filename(),
                "--compilation_level",
                self._level.value,
                "--json_streams",
                "IN",
            ],
            input=dumps([{"path": file_path, "src": source}]),
            capture_output=True,
            encoding="utf8",
        )
        if completed_process.returncode != 0:
            msg = completed_process.stderr.strip() or (
                f"{self._java[0]} exited with code {completed_process.returncode}"
            )
            raise CompilerError(msg)
        return completed_process.stdout
