from __future__ import annotations

import time
from dataclasses import dataclass, field


@dataclass
class StepResult:
    """Outcome of a single smoke step."""

    name: str
    ok: bool
    elapsed_ms: float
    detail: str | None = None


@dataclass
class SmokeReport:
    """Collected step results for one smoke run."""

    base_url: str
    steps: list[StepResult] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return bool(self.steps) and all(s.ok for s in self.steps)

    def summary(self) -> dict:
        return {
            "component": "runner",
            "event": "summary",
            "base_url": self.base_url,
            "ok": self.ok,
            "steps": [
                {
                    "name": s.name,
                    "ok": s.ok,
                    "elapsed_ms": round(s.elapsed_ms, 2),
                    "detail": s.detail,
                }
                for s in self.steps
            ],
        }


def now_ms() -> float:
    """Return a monotonic timestamp in milliseconds."""
    return time.perf_counter() * 1000.0
