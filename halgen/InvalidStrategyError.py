"""Invalid strategy error."""

from typing import Any


class InvalidStrategyError(Exception):
    """Raised when a registered strategy does not implement ResourceStrategy."""

    @classmethod
    def for_type(cls, strategy_type: Any) -> "InvalidStrategyError":
        name = getattr(strategy_type, "__qualname__", None) or repr(strategy_type)
        return cls(f"Strategy type {name} is not a ResourceStrategy subclass")

    @classmethod
    def for_instance(cls, strategy: Any) -> "InvalidStrategyError":
        return cls(f"Strategy of type {type(strategy).__qualname__} does not implement ResourceStrategy")
