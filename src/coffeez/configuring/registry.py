# mypy: disable-error-code="attr-defined"
# ruff: noqa: SLF001
from abc import ABCMeta
from collections.abc import Callable
from logging import getLogger
from typing import TYPE_CHECKING, Any, ClassVar, ParamSpec, TypeVar

from ..exceptions import UnknownComponentError

if TYPE_CHECKING:
    from pydantic import BaseModel

    from .settings import Settings

# Cannot use typing.Self in metaclasses for some reason
_Self = TypeVar("_Self", bound="RegistryMeta")
P = ParamSpec("P")
T = TypeVar("T")
_logger = getLogger(__name__)


class RegistryMeta(ABCMeta):
    registries: ClassVar[dict[str, set[str]]] = {}

    def __new__(
        cls: type[_Self],
        name: str,
        bases: tuple[type, ...],
        namespace: dict[str, Any],
        *_args: Any,
        **_kwargs: Any,
    ) -> _Self:
        return super().__new__(cls, name, bases, namespace)

    def __init__(
        cls: _Self,
        name: str,
        bases: tuple[type, ...],
        namespace: dict[str, Any],
        key: str | None = None,
        extra_kwargs_class: type["BaseModel"] | None = None,
    ) -> None:
        super().__init__(name, bases, namespace)
        # No registering is done if key is None
        if key is None:
            return
        registry_name: str | None = None
        registry = None
        for base in bases:
            if isinstance(base, RegistryMeta) and hasattr(base, "_registry"):
                registry_name = base._registry_name  # type: ignore
                registry = base._registry
        # Interface, direct child of Component, parent of implementations
        if registry is None:
            _logger.debug(
                "Creating registry [green]%s[/] based on class %s",
                key,
                cls,
                extra={"markup": True},
            )
            cls._registry: dict[str, tuple[_Self, type[BaseModel] | None]] = {}
            cls._registry_name = key
            RegistryMeta.registries[key] = set()
        # Implementation, child of an interface
        else:
            _logger.debug(
                "Registering %s as [green]%s/%s[/]",
                cls,
                registry_name,
                key,
                extra={"markup": True},
            )
            registry[key] = (cls, extra_kwargs_class)
            assert registry_name is not None
            RegistryMeta.registries[registry_name].add(key)


class Component(metaclass=RegistryMeta):
    @classmethod
    def new(
        cls: Callable[P, T],
        _key: str,
        _settings: "Settings",
        /,
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> T:
        """Instantiate the implementation registered under `_key`.

        Keyword arguments found in the settings under \
        `components.<registry name>.<key>` are validated with the implementation's \
        extra kwargs class and passed to its constructor.

        Args:
            _key: Key of the implementation in the registry of this interface.
            _settings: Settings holding the extra kwargs of the implementation.
            args: Positional arguments passed to the constructor.
            kwargs: Keyword arguments passed to the constructor.

        Raises:
            UnknownComponentError: Raised if no implementation is registered under \
                `_key`.

        Returns:
            The new instance.
        """
        if _key not in cls._registry:
            known = ", ".join(sorted(cls._registry)) or "none"
            msg = f"unknown {cls._registry_name} {_key!r} (known: {known})"
            raise UnknownComponentError(msg)
        (subclass, extra_kwargs_class) = cls._registry[_key]
        conf_dct = _settings.components.get(cls._registry_name, {}).get(_key, {})
        extra_kwargs = (
            vars(extra_kwargs_class.model_validate(conf_dct, context=_settings))
            if extra_kwargs_class
            else {}
        )
        _logger.debug(
            "Instantiating class %s from registry entry %s/%s with args %s, kwargs %s "
            "and extra kwargs %s",
            subclass,
            cls._registry_name,
            _key,
            args,
            kwargs,
            extra_kwargs,
        )
        return subclass(*args, **kwargs, **extra_kwargs)
