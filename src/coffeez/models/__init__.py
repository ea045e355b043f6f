"""Model classes for the different parts of coffeez.

- [`compilation`][coffeez.models.compilation] contains the value objects exchanged \
    with the transformer: the request, its two possible results, and the raw output \
    of a compiler backend
- [`options`][coffeez.models.options] contains the Pydantic model of the options \
    forwarded to the CoffeeScript compiler
- [`minification`][coffeez.models.minification] contains the value objects \
    exchanged with the JavaScript minifiers
"""

from .compilation import (
    CompilationRequest,
    CompilationResult,
    CompiledOutput,
    Failure,
    Success,
)
from .minification import (
    CompilationLevel,
    MinificationRequest,
    MinificationResult,
    Minified,
)
from .options import CompileOptions

__all__ = [
    "CompilationLevel",
    "CompilationRequest",
    "CompilationResult",
    "CompileOptions",
    "CompiledOutput",
    "Failure",
    "MinificationRequest",
    "MinificationResult",
    "Minified",
    "Success",
]
