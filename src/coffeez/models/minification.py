from dataclasses import dataclass
from enum import Enum
from typing import Literal, TypeAlias

from .compilation import Failure


class CompilationLevel(Enum):
    WhitespaceOnly = "WHITESPACE_ONLY"
    Simple = "SIMPLE_OPTIMIZATIONS"
    Advanced = "ADVANCED_OPTIMIZATIONS"


@dataclass(frozen=True)
class MinificationRequest:
    source_text: str
    file_path: str
    """Path of the JavaScript file, only used to attribute diagnostics."""


@dataclass(frozen=True)
class Minified:
    code: str
    ok: Literal[True] = True


MinificationResult: TypeAlias = Minified | Failure
