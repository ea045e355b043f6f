from typing import Any

app_name = "coffeez"
__version__ = "0.3.0"


def __getattr__(name: str) -> Any:
    """Lazy-load attributes of the coffeez package.

    The entry point (the main function of the coffeez.cli.__init__ file) has to setup \
    logging before the compiler backends get imported and registered. Loading \
    coffeez.cli.__init__ entails loading coffeez.__init__ first, so the public \
    attributes are exposed lazily instead of being imported at the top of this file.

    Args:
        name: Name of the attribute to load.

    Raises:
        AttributeError: Raised if the name doesn't match a lazy-loadable attribute.

    Returns:
        Lazy-loaded attribute.
    """
    match name:
        case "transform":
            from .transformer import transform

            return transform
        case "SourceTransformer":
            from .transformer import SourceTransformer

            return SourceTransformer
        case "CompilationRequest" | "Success" | "Failure":
            from . import models

            return getattr(models, name)
        case _:
            msg = f"cannot find the attribute {name} in module {__name__}"
            raise AttributeError(msg)
