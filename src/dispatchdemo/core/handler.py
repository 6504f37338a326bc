# src/dispatchdemo/core/handler.py
from __future__ import annotations
from typing import Callable, Optional

from dispatchdemo.core import log
from dispatchdemo.core.contracts import Variant, FirstVariant, SecondVariant
from dispatchdemo.core.metrics import inc_counter

Emit = Callable[[str], None]

GENERAL = "Protocol"
FIRST = "First Class"
SECOND = "Second Class"


class Handler:
    """Three operations, one per argument type.

    handle() accepts any Variant and never looks at the concrete type.
    handle_first() / handle_second() are only reached when the caller
    already knows the concrete type, i.e. from inside Variant.dispatch().
    """

    def __init__(self, emit: Optional[Emit] = None):
        if emit is not None and not callable(emit):
            raise TypeError(f"emit must be callable, got {type(emit).__name__}")
        self.emit: Emit = emit or print
        self.l = log.get("dispatchdemo.handler")

    def handle(self, argument: Variant) -> str:
        return self._out(GENERAL, "general", argument)

    def handle_first(self, argument: FirstVariant) -> str:
        return self._out(FIRST, "first", argument)

    def handle_second(self, argument: SecondVariant) -> str:
        return self._out(SECOND, "second", argument)

    def _out(self, text: str, route: str, argument: Variant) -> str:
        self.l.debug("route=%s arg=%s", route, type(argument).__name__)
        inc_counter("dispatch_total", route=route)
        self.emit(text)
        return text
