from collections.abc import Mapping
from logging import getLogger
from threading import Lock
from typing import Any

from pydantic import BaseModel

from ..models import CompiledOutput
from . import Compiler

_logger = getLogger(__name__)

# Appended to the CoffeeScript browser bundle, which defines the CoffeeScript global
_entry_point = """
function compileCoffeeScript(source, options) {
    var result = CoffeeScript.compile(source, options);
    if (typeof result === "string") {
        return {js: result, v3SourceMap: ""};
    }
    return {js: result.js, v3SourceMap: result.v3SourceMap || ""};
}
"""


class ExecJSCompilerExtraKwArgs(BaseModel):
    runtime: str | None = None


class ExecJSCompiler(
    Compiler, key="execjs", extra_kwargs_class=ExecJSCompilerExtraKwArgs
):
    """Run the compiler bundled with the CoffeeScript distribution through PyExecJS.

    The execjs context is created on first use and reused afterwards.
    """

    def __init__(self, runtime: str | None = None) -> None:
        self._runtime_name = runtime
        self._context: Any = None
        self._lock = Lock()

    def compile(self, source: str, options: Mapping[str, Any]) -> CompiledOutput:
        result = self._get_context().call("compileCoffeeScript", source, dict(options))
        return CompiledOutput(js=result["js"], v3_source_map=result["v3SourceMap"])

    def _get_context(self) -> Any:
        with self._lock:
            if self._context is None:
                from coffeescript import get_compiler_script
                from execjs import get

                runtime = get(self._runtime_name)
                _logger.debug("Loading the CoffeeScript compiler in %s", runtime.name)
                self._context = runtime.compile(get_compiler_script() + _entry_point)
            return self._context
