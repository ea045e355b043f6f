from typing import TYPE_CHECKING

from . import Compiler, Minifier

if TYPE_CHECKING:
    from ..configuring.settings import Settings
    from ..transformer import SourceTransformer


class SettingsFactory:
    def __init__(self, settings: "Settings") -> None:
        self._settings = settings

    def compiler(self) -> Compiler:
        return Compiler.new(self._settings.compiler, self._settings)

    def transformer(self) -> "SourceTransformer":
        from ..transformer import SourceTransformer

        return SourceTransformer(
            compiler=self.compiler(), options=self._settings.options
        )

    def minifier(self) -> Minifier | None:
        if self._settings.minifier is None:
            return None
        return Minifier.new(self._settings.minifier, self._settings)
