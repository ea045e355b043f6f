from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from ..models import CompiledOutput


class CompilerProtocol(Protocol):
    def compile(self, source: str, options: Mapping[str, Any]) -> "CompiledOutput": ...
