class CoffeezError(Exception):
    pass


class CompilerError(CoffeezError):
    """Raised by a compiler backend when the CoffeeScript compiler rejects a source."""


class UnknownComponentError(CoffeezError):
    pass


class CompilationFailedError(CoffeezError):
    pass
