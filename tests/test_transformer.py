from collections.abc import Mapping
from json import loads
from typing import Any

from pytest import mark

from coffeez.models import (
    CompilationRequest,
    CompiledOutput,
    CompileOptions,
    Failure,
    Success,
)
from coffeez.transformer import SourceTransformer, source_map_name, transform

from .conftest import FakeCompiler


class _RaisingCompiler:
    def __init__(self, error: Exception) -> None:
        self._error = error

    def compile(self, source: str, options: Mapping[str, Any]) -> CompiledOutput:
        raise self._error


def _request(source_text: str = "x = 1") -> CompilationRequest:
    return CompilationRequest(
        source_text=source_text, file_path="/tmp/a.coffee", display_name="a.coffee"
    )


def test_success_appends_source_mapping_url(fake_compiler: FakeCompiler) -> None:
    result = SourceTransformer(fake_compiler).transform(_request())

    assert isinstance(result, Success)
    assert result.ok
    assert result.emitted_code == (
        "// Generated by FakeScript\n"
        "x = 1;\n"
        "\n"
        "//# sourceMappingURL=a.coffee@source.map\n"
    )
    assert result.emitted_code.splitlines()[-1] == (
        "//# sourceMappingURL=a.coffee@source.map"
    )


def test_success_keeps_source_map(fake_compiler: FakeCompiler) -> None:
    result = SourceTransformer(fake_compiler).transform(_request())

    assert isinstance(result, Success)
    assert loads(result.source_map)["sources"] == ["a.coffee"]


def test_default_options_are_forwarded(fake_compiler: FakeCompiler) -> None:
    SourceTransformer(fake_compiler).transform(_request())

    assert fake_compiler.calls == [
        (
            "x = 1",
            {
                "header": True,
                "filename": "/tmp/a.coffee",
                "sourceFiles": ["a.coffee"],
                "sourceMap": True,
                "inline": True,
            },
        )
    ]


def test_custom_options_are_forwarded(fake_compiler: FakeCompiler) -> None:
    transformer = SourceTransformer(fake_compiler, CompileOptions(header=False))

    result = transformer.transform(_request())

    assert fake_compiler.calls[0][1]["header"] is False
    assert isinstance(result, Success)
    assert not result.emitted_code.startswith("// Generated")


def test_compiler_error_becomes_failure(fake_compiler: FakeCompiler) -> None:
    result = SourceTransformer(fake_compiler).transform(_request("x = "))

    assert isinstance(result, Failure)
    assert not result.ok
    assert result.message == "/tmp/a.coffee: error: unexpected end of input"


@mark.parametrize(
    "error",
    [
        RuntimeError("JavaScript runtime crashed"),
        FileNotFoundError(2, "No such file or directory", "node"),
        KeyError("js"),
        ValueError(),
    ],
)
def test_any_error_becomes_failure(error: Exception) -> None:
    result = SourceTransformer(_RaisingCompiler(error)).transform(_request())

    assert isinstance(result, Failure)
    assert result.message


def test_empty_message_falls_back_to_error_name() -> None:
    result = SourceTransformer(_RaisingCompiler(ValueError())).transform(_request())

    assert result == Failure(message="ValueError")


def test_empty_source(fake_compiler: FakeCompiler) -> None:
    result = SourceTransformer(fake_compiler).transform(_request(""))

    assert isinstance(result, Success)
    assert result.emitted_code == (
        "// Generated by FakeScript\n\n//# sourceMappingURL=a.coffee@source.map\n"
    )


def test_transform_is_deterministic(fake_compiler: FakeCompiler) -> None:
    transformer = SourceTransformer(fake_compiler)

    assert transformer.transform(_request()) == transformer.transform(_request())


def test_transform_function_with_compiler(fake_compiler: FakeCompiler) -> None:
    result = transform("x = 1", "/tmp/b.coffee", "b.coffee", compiler=fake_compiler)

    assert isinstance(result, Success)
    assert result.emitted_code.endswith("//# sourceMappingURL=b.coffee@source.map\n")


def test_source_map_name() -> None:
    assert source_map_name("main.coffee") == "main.coffee@source.map"
