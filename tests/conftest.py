from collections.abc import Mapping
from json import dumps
from pathlib import Path
from shutil import which
from subprocess import run
from typing import Any

import appdirs
from pytest import fixture, importorskip, skip

from coffeez.components import Compiler, Minifier
from coffeez.components.closure_minifier import ClosureMinifier
from coffeez.components.execjs_compiler import ExecJSCompiler
from coffeez.components.node_compiler import NodeCompiler
from coffeez.exceptions import CompilerError
from coffeez.models import CompiledOutput


class FakeCompiler(Compiler, key="fake"):
    """Echo the source as JavaScript, reject sources ending with an assignment."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, dict[str, Any]]] = []

    def compile(self, source: str, options: Mapping[str, Any]) -> CompiledOutput:
        self.calls.append((source, dict(options)))
        if source.rstrip().endswith("="):
            msg = f"{options['filename']}: error: unexpected end of input"
            raise CompilerError(msg)
        header = "// Generated by FakeScript\n" if options["header"] else ""
        return CompiledOutput(
            js=header + "".join(f"{line};\n" for line in source.splitlines()),
            v3_source_map=dumps(
                {
                    "version": 3,
                    "file": "",
                    "sourceRoot": "",
                    "sources": options["sourceFiles"],
                    "names": [],
                    "mappings": "",
                }
            ),
        )


class FakeMinifier(Minifier, key="fake"):
    """Drop comments and join lines, reject code containing `debugger`."""

    def _minify(self, source: str, file_path: str) -> str:
        if "debugger" in source:
            msg = f"{file_path}: ERROR - debugger statement"
            raise CompilerError(msg)
        return "".join(
            line.strip() for line in source.splitlines() if not line.startswith("//")
        )


@fixture
def fake_minifier() -> FakeMinifier:
    return FakeMinifier()


@fixture
def fake_compiler() -> FakeCompiler:
    return FakeCompiler()


@fixture
def working_dir(tmp_path: Path, monkeypatch: Any) -> Path:
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    working_dir = tmp_path / "project"
    working_dir.mkdir()
    monkeypatch.chdir(working_dir)
    monkeypatch.setattr(appdirs, "user_config_dir", lambda _: str(config_dir))
    (working_dir / "coffeez.yml").write_text("compiler: fake\n", encoding="utf8")
    return working_dir


@fixture(scope="session")
def execjs_compiler() -> ExecJSCompiler:
    execjs = importorskip("execjs")
    importorskip("coffeescript")
    try:
        execjs.get()
    except execjs.RuntimeUnavailableError:
        skip("no JavaScript runtime available")
    return ExecJSCompiler()


@fixture(scope="session")
def node_compiler() -> NodeCompiler:
    if which("node") is None:
        skip("node is not installed")
    if run(["node", "-e", "require('coffeescript')"], capture_output=True).returncode:
        skip("the coffeescript node module is not installed")
    return NodeCompiler()


@fixture(scope="session")
def closure_minifier() -> ClosureMinifier:
    importorskip("closure")
    if which("java") is None:
        skip("java is not installed")
    return ClosureMinifier()
