from __future__ import annotations

class NotMappableError(TypeError):
    """fmap has no instance for this context type."""

    context_type: type

    def __init__(self, context_type: type) -> None:
        self.context_type = context_type
        super().__init__(f"No fmap instance for {context_type.__qualname__}")

class UnknownSymbolError(KeyError):
    """Operator spelling is not part of the symbol table."""

    symbol: str

    def __init__(self, symbol: str) -> None:
        self.symbol = symbol
        super().__init__(f"Unknown operator {symbol!r}")

__all__ = ("NotMappableError", "UnknownSymbolError")
