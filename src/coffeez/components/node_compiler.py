from collections.abc import Iterable, Mapping
from json import dumps, loads
from subprocess import run
from typing import Any

from pydantic import BaseModel

from ..exceptions import CompilerError
from ..models import CompiledOutput
from . import Compiler

# Receives the name of the module to require as first argument and a JSON request on
# stdin. Failures are reported on stderr with a non-zero exit code.
_script = """
const coffee = require(process.argv[1]);
let input = "";
process.stdin.setEncoding("utf8");
process.stdin.on("data", (chunk) => { input += chunk; });
process.stdin.on("end", () => {
  const request = JSON.parse(input);
  try {
    let result = coffee.compile(request.source, request.options);
    if (typeof result === "string") {
      result = { js: result };
    }
    process.stdout.write(
      JSON.stringify({ js: result.js, v3SourceMap: result.v3SourceMap || "" })
    );
  } catch (err) {
    process.stderr.write(err.toString());
    process.exitCode = 1;
  }
});
"""


class NodeCompilerExtraKwArgs(BaseModel):
    command: tuple[str, ...] = ("node",)
    module: str = "coffeescript"


class NodeCompiler(Compiler, key="node", extra_kwargs_class=NodeCompilerExtraKwArgs):
    """Run an installed `coffeescript` node module in a subprocess."""

    def __init__(
        self, command: Iterable[str] = ("node",), module: str = "coffeescript"
    ) -> None:
        self._command = tuple(command)
        self._module = module

    def compile(self, source: str, options: Mapping[str, Any]) -> CompiledOutput:
        completed_process = run(
            [*self._command, "-e", _script, self._module],
            input=dumps({"source": source, "options": dict(options)}),
            capture_output=True,
            encoding="utf8",
        )
        if completed_process.returncode != 0:
            msg = completed_process.stderr.strip() or (
                f"{self._command[0]} exited with code {completed_process.returncode}"
            )
            raise CompilerError(msg)
        result = loads(completed_process.stdout)
        return CompiledOutput(js=result["js"], v3_source_map=result["v3SourceMap"])
