from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dispatchdemo.core.handler import Handler


__all__ = [
    "Variant",
    "FirstVariant",
    "SecondVariant",
]


# --------- Capability ---------
@dataclass(frozen=True)
class Variant:
    """Something that can dispatch itself into a Handler.

    The base form only knows it is a Variant, so it reaches the handler's
    general operation. Concrete variants override dispatch() to name their
    own operation.
    """

    def dispatch(self, handler: Handler) -> str:
        return handler.handle(self)


# --------- Concrete variants ---------
@dataclass(frozen=True)
class FirstVariant(Variant):
    def dispatch(self, handler: Handler) -> str:
        return handler.handle_first(self)


@dataclass(frozen=True)
class SecondVariant(Variant):
    def dispatch(self, handler: Handler) -> str:
        return handler.handle_second(self)
