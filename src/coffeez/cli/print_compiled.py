from pathlib import Path

from . import app


@app.command(name="print")
def print_compiled(file: Path, /, *, workdir: Path = Path()) -> None:
    """Print the JavaScript compiled from FILE, or the compiler's error.

    Args:
        file: CoffeeScript file to compile
        workdir: Path to move into before running the command

    """
    from sys import stdout

    from ..components.factory import SettingsFactory
    from ..configuring.settings import Settings
    from ..models import CompilationRequest, Failure

    result = (
        SettingsFactory(Settings.from_yaml(workdir))
        .transformer()
        .transform(
            CompilationRequest(
                source_text=file.read_text(encoding="utf8"),
                file_path=str(file),
                display_name=file.name,
            )
        )
    )
    if isinstance(result, Failure):
        stdout.write(f"{result.message}\n")
        raise SystemExit(1)
    stdout.write(result.emitted_code)
