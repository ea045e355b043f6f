"""Transform CoffeeScript source into JavaScript and its source map.

The transformer never raises because of a compilation: whatever the compiler raises is \
turned into a [`Failure`][coffeez.models.Failure] carrying the compiler's message.
"""

from functools import cache
from logging import getLogger
from typing import TYPE_CHECKING

from .models import (
    CompilationRequest,
    CompilationResult,
    CompileOptions,
    Failure,
    Success,
)

if TYPE_CHECKING:
    from .components.protocols import CompilerProtocol

_logger = getLogger(__name__)

source_map_suffix = "@source.map"


def source_map_name(display_name: str) -> str:
    """Name of the companion map file referenced by the code emitted for a file."""
    return f"{display_name}{source_map_suffix}"


class SourceTransformer:
    def __init__(
        self, compiler: "CompilerProtocol", options: CompileOptions | None = None
    ) -> None:
        self._compiler = compiler
        self._options = options if options is not None else CompileOptions()

    def transform(self, request: CompilationRequest) -> CompilationResult:
        """Compile a request.

        Args:
            request: Source and naming metadata of the file to compile.

        Returns:
            A [`Success`][coffeez.models.Success] with the emitted code, ending with a \
            `sourceMappingURL` comment naming `<display_name>@source.map`, and the \
            v3 source map. A [`Failure`][coffeez.models.Failure] if the compiler \
            raised.
        """
        try:
            output = self._compiler.compile(
                request.source_text, self._options.for_request(request)
            )
        except Exception as e:  # noqa: BLE001
            _logger.debug("Compilation of %s failed: %s", request.file_path, e)
            return Failure(message=str(e) or type(e).__name__)
        return Success(
            emitted_code=(
                f"{output.js}\n"
                f"//# sourceMappingURL={source_map_name(request.display_name)}\n"
            ),
            source_map=output.v3_source_map,
        )


@cache
def _default_transformer() -> SourceTransformer:
    from .components.execjs_compiler import ExecJSCompiler

    return SourceTransformer(ExecJSCompiler())


def transform(
    source_text: str,
    file_path: str,
    display_name: str,
    compiler: "CompilerProtocol | None" = None,
) -> CompilationResult:
    """Compile CoffeeScript source text.

    Args:
        source_text: CoffeeScript code.
        file_path: Path used to attribute diagnostics.
        display_name: Short name labelling the source map.
        compiler: Compiler to use. Defaults to the compiler bundled with the \
            CoffeeScript distribution, run through PyExecJS.

    Returns:
        The result of the compilation, see [`SourceTransformer.transform`].
    """
    transformer = (
        _default_transformer() if compiler is None else SourceTransformer(compiler)
    )
    return transformer.transform(
        CompilationRequest(
            source_text=source_text, file_path=file_path, display_name=display_name
        )
    )
