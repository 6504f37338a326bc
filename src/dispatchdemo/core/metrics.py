from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

# ---------------- Utilities ----------------

LabelKey = Tuple[Tuple[str, str], ...]  # sorted tuple of (k,v)


def _labels_key(labels: Dict[str, Any] | None) -> LabelKey:
    if not labels:
        return tuple()
    return tuple(sorted((str(k), str(v)) for k, v in labels.items()))


# ---------------- Metric types ----------------

@dataclass
class _Base:
    name: str
    labels: LabelKey


class Counter(_Base):
    def __init__(self, name: str, labels: LabelKey):
        super().__init__(name, labels)
        self._value = 0.0

    def inc(self, n: float = 1.0) -> None:
        self._value += n

    def value(self) -> float:
        return self._value


# ---------------- Registry ----------------

class _Registry:
    def __init__(self) -> None:
        self._counters: Dict[Tuple[str, LabelKey], Counter] = {}

    def counter(self, name: str, labels: Dict[str, Any] | None) -> Counter:
        key = (name, _labels_key(labels))
        m = self._counters.get(key)
        if m is None:
            m = Counter(name, key[1])
            self._counters[key] = m
        return m

    def items(self):
        return list(self._counters.items())

    def clear(self) -> None:
        self._counters.clear()


_REG = _Registry()

# ---------------- Public API ----------------

def inc_counter(name: str, n: float = 1.0, **labels: Any) -> None:
    _REG.counter(name, labels).inc(n)


def counter_value(name: str, **labels: Any) -> float:
    """Current value of one labelled counter (0.0 if never incremented)."""
    key = (name, _labels_key(labels))
    for k, m in _REG.items():
        if k == key:
            return m.value()
    return 0.0


def reset() -> None:
    """Drop every registered metric."""
    _REG.clear()


# ---------------- Snapshot helpers ----------------

def snapshot_all() -> dict:
    """Return a snapshot of current metrics (for tests)."""
    out = {"counters": []}
    for (name, labels), m in _REG.items():
        out["counters"].append({"name": name, "labels": dict(labels), "value": m.value()})
    return out


def force_emit(logger: Optional[logging.Logger] = None, json_mode: bool = False) -> None:
    """Log the current snapshot now."""
    log = logger or logging.getLogger("metrics")
    for (_, labels), m in _REG.items():
        if json_mode:
            log.info({"type": "counter", "name": m.name, "labels": dict(labels), "value": m.value()})
        else:
            log.info(f"[ctr] {m.name} {dict(labels)} value={m.value():.0f}")
