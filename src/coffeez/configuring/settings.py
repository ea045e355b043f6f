from functools import reduce
from pathlib import Path
from typing import Annotated, Any, Self

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    ValidationInfo,
)

from .. import app_name
from ..models import CompileOptions
from ..utils import load_all_yamls

settings_filename = f"{app_name}.yml"


def _convert(input_value: str | Path, info: ValidationInfo) -> Path:
    path = (
        Path(input_value.format(**info.data))
        if isinstance(input_value, str)
        else input_value
    )
    # Relative paths are relative to the working directory, not to the process cwd
    if not path.is_absolute() and "current_dir" in info.data:
        return info.data["current_dir"] / path
    return path


_Path = Annotated[Path, BeforeValidator(_convert), AfterValidator(Path.resolve)]


def user_config_dir() -> Path:
    from appdirs import user_config_dir as appdirs_user_config_dir

    return Path(appdirs_user_config_dir(app_name)).resolve()


class Settings(BaseModel):
    model_config = ConfigDict(validate_default=True)

    current_dir: _Path
    compiler: str = "execjs"
    minifier: str | None = None
    options: CompileOptions = Field(default_factory=CompileOptions)
    file_extension: str = ".coffee"
    output_dir: _Path = "{current_dir}/js"
    components: dict[str, dict[str, dict[str, Any]]] = Field(default_factory=dict)

    @classmethod
    def from_yaml(cls, path: Path) -> Self:
        """Load the settings applying to a working directory.

        The `coffeez.yml` files of the user configuration directory and of the \
        working directory are merged, the latter taking precedence.

        Args:
            path: Working directory.

        Returns:
            The validated settings.
        """
        resolved_path = path.resolve()
        content: dict[str, Any] = reduce(
            lambda a, b: {**a, **b},
            (
                c
                for c in load_all_yamls(
                    d / settings_filename
                    for d in (user_config_dir(), resolved_path)
                )
                if c
            ),
            {},
        )
        if "current_dir" not in content:
            content["current_dir"] = resolved_path
        return cls.model_validate(content)
