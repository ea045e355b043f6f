from dataclasses import dataclass
from typing import Literal, TypeAlias


@dataclass(frozen=True)
class CompilationRequest:
    """A unit of CoffeeScript source to transform."""

    source_text: str
    """Content of the file. Can be empty or invalid."""

    file_path: str
    """Path of the file, only used to attribute diagnostics."""

    display_name: str
    """Short name of the file (usually the last term of `file_path`).

    Labels the source map and names the companion map file \
    `<display_name>@source.map`.
    """


@dataclass(frozen=True)
class Success:
    emitted_code: str
    source_map: str
    ok: Literal[True] = True


@dataclass(frozen=True)
class Failure:
    message: str
    ok: Literal[False] = False


CompilationResult: TypeAlias = Success | Failure


@dataclass(frozen=True)
class CompiledOutput:
    """Raw output of a compiler backend, before any post-processing."""

    js: str
    v3_source_map: str
