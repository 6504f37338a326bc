# src/dispatchdemo/demo.py
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Iterable, List, Optional

from dispatchdemo.core import log
from dispatchdemo.core.contracts import Variant, FirstVariant, SecondVariant
from dispatchdemo.core.handler import Handler
from dispatchdemo.core.metrics import force_emit, inc_counter

lg = log.get("dispatchdemo.demo")


@dataclass
class DemoConfig:
    log_level: Optional[str] = None
    log_json: bool = False
    metrics: bool = False

    @classmethod
    def from_env(cls) -> "DemoConfig":
        log.load_env()
        return cls(
            log_level=os.getenv("LOG_LEVEL"),
            log_json=(os.getenv("LOG_JSON", "0") == "1"),
            metrics=(os.getenv("DEMO_METRICS", "0") == "1"),
        )


def build_collection() -> List[Variant]:
    return [FirstVariant(), SecondVariant()]


def _check(element: object) -> Variant:
    if not isinstance(element, Variant):
        raise TypeError(f"expected Variant, got {type(element).__name__}")
    return element


def single_dispatch_pass(collection: Iterable[Variant], handler: Handler) -> List[str]:
    """Hand every element to handler.handle(); the concrete type is never consulted."""
    items = list(collection)
    lg.info("single dispatch pass n=%d", len(items))
    inc_counter("dispatch_pass_total", mode="single")
    return [handler.handle(_check(v)) for v in items]


def double_dispatch_pass(collection: Iterable[Variant], handler: Handler) -> List[str]:
    """Let every element pick the handler operation for its own type."""
    items = list(collection)
    lg.info("double dispatch pass n=%d", len(items))
    inc_counter("dispatch_pass_total", mode="double")
    return [_check(v).dispatch(handler) for v in items]


def run(config: Optional[DemoConfig] = None) -> None:
    cfg = config or DemoConfig.from_env()
    objects = build_collection()
    handler = Handler()

    single_dispatch_pass(objects, handler)
    double_dispatch_pass(objects, handler)

    if cfg.metrics:
        # snapshot is INFO; keep it visible under the default WARNING root level
        log.get("metrics").setLevel(logging.INFO)
        force_emit(logger=log.get("metrics"), json_mode=cfg.log_json)


def main() -> None:
    cfg = DemoConfig.from_env()
    log.setup(cfg.log_level, cfg.log_json)
    run(cfg)


if __name__ == "__main__":
    main()
