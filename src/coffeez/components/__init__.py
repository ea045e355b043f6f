from abc import abstractmethod
from collections.abc import Mapping
from logging import getLogger
from typing import TYPE_CHECKING, Any

from ..configuring.registry import Component

if TYPE_CHECKING:
    from ..models import CompiledOutput, MinificationRequest, MinificationResult

_logger = getLogger(__name__)


class Compiler(Component, key="compiler"):
    """Compile CoffeeScript source into JavaScript.

    Implementations wrap an actual CoffeeScript compiler. They raise when the \
    compiler rejects the source, with a message describing the problem.
    """

    @abstractmethod
    def compile(self, source: str, options: Mapping[str, Any]) -> "CompiledOutput":
        """Compile a CoffeeScript source.

        Args:
            source: CoffeeScript code.
            options: Options passed to `CoffeeScript.compile`, see \
                [`CompileOptions`][coffeez.models.CompileOptions].

        Returns:
            The emitted JavaScript and its v3 source map.
        """
        raise NotImplementedError


class Minifier(Component, key="minifier"):
    """Minify JavaScript.

    Like the transformer, `minify` never raises: whatever `_minify` raises is turned \
    into a [`Failure`][coffeez.models.Failure].
    """

    def minify(self, request: "MinificationRequest") -> "MinificationResult":
        from ..models import Failure, Minified

        try:
            code = self._minify(request.source_text, request.file_path)
        except Exception as e:  # noqa: BLE001
            _logger.debug("Minification of %s failed: %s", request.file_path, e)
            return Failure(message=str(e) or type(e).__name__)
        return Minified(code=code)

    @abstractmethod
    def _minify(self, source: str, file_path: str) -> str:
        raise NotImplementedError


def _load_components() -> None:
    from ..utils import import_module_and_submodules

    import_module_and_submodules(__name__)


_load_components()
