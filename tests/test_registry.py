from pathlib import Path

from pydantic import ValidationError
from pytest import raises

from coffeez.components import Compiler
from coffeez.components.closure_minifier import ClosureMinifier
from coffeez.components.execjs_compiler import ExecJSCompiler
from coffeez.components.factory import SettingsFactory
from coffeez.components.node_compiler import NodeCompiler
from coffeez.configuring.registry import RegistryMeta
from coffeez.configuring.settings import Settings
from coffeez.exceptions import UnknownComponentError
from coffeez.models import CompilationLevel
from coffeez.transformer import SourceTransformer


def test_compilers_are_registered() -> None:
    assert {"execjs", "node", "fake"} <= RegistryMeta.registries["compiler"]


def test_new_with_extra_kwargs(tmp_path: Path) -> None:
    settings = Settings(
        current_dir=tmp_path,
        components={
            "compiler": {"node": {"command": ["nodejs"], "module": "coffee-script"}}
        },
    )

    compiler = Compiler.new("node", settings)

    assert isinstance(compiler, NodeCompiler)
    assert compiler._command == ("nodejs",)  # noqa: SLF001
    assert compiler._module == "coffee-script"  # noqa: SLF001


def test_new_with_default_kwargs(tmp_path: Path) -> None:
    compiler = Compiler.new("execjs", Settings(current_dir=tmp_path))

    assert isinstance(compiler, ExecJSCompiler)
    assert compiler._runtime_name is None  # noqa: SLF001


def test_new_with_invalid_kwargs(tmp_path: Path) -> None:
    settings = Settings(
        current_dir=tmp_path, components={"compiler": {"node": {"module": ["a"]}}}
    )

    with raises(ValidationError):
        Compiler.new("node", settings)


def test_new_unknown_key(tmp_path: Path) -> None:
    with raises(UnknownComponentError, match="unknown compiler 'tsc'"):
        Compiler.new("tsc", Settings(current_dir=tmp_path))


def test_factory_transformer(tmp_path: Path) -> None:
    settings = Settings(current_dir=tmp_path, compiler="fake")

    transformer = SettingsFactory(settings).transformer()

    assert isinstance(transformer, SourceTransformer)
    assert type(SettingsFactory(settings).compiler()).__name__ == "FakeCompiler"


def test_minifiers_are_registered() -> None:
    assert {"closure", "fake"} <= RegistryMeta.registries["minifier"]


def test_new_closure_with_level(tmp_path: Path) -> None:
    settings = Settings(
        current_dir=tmp_path,
        minifier="closure",
        components={"minifier": {"closure": {"level": "ADVANCED_OPTIMIZATIONS"}}},
    )

    minifier = SettingsFactory(settings).minifier()

    assert isinstance(minifier, ClosureMinifier)
    assert minifier._level is CompilationLevel.Advanced  # noqa: SLF001
    assert minifier._java == ("java",)  # noqa: SLF001


def test_new_closure_with_invalid_level(tmp_path: Path) -> None:
    settings = Settings(
        current_dir=tmp_path,
        minifier="closure",
        components={"minifier": {"closure": {"level": "EXTREME"}}},
    )

    with raises(ValidationError):
        SettingsFactory(settings).minifier()


def test_factory_without_minifier(tmp_path: Path) -> None:
    assert SettingsFactory(Settings(current_dir=tmp_path)).minifier() is None
