from typing import TYPE_CHECKING, Any

from pydantic import BaseModel

if TYPE_CHECKING:
    from .compilation import CompilationRequest


class CompileOptions(BaseModel):
    """Flags forwarded untouched to the CoffeeScript compiler."""

    header: bool = True
    """Emit the "Generated by CoffeeScript" header comment."""

    source_map: bool = True
    """Ask the compiler for a v3 source map."""

    inline: bool = True
    """Inline compiler-internal source maps instead of referencing them."""

    def for_request(self, request: "CompilationRequest") -> dict[str, Any]:
        """Build the configuration bundle of the compiler for a given request.

        Args:
            request: Request to compile.

        Returns:
            Options in the format expected by `CoffeeScript.compile`.
        """
        return {
            "header": self.header,
            "filename": request.file_path,
            "sourceFiles": [request.display_name],
            "sourceMap": self.source_map,
            "inline": self.inline,
        }
