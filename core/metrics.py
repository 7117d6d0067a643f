from __future__ import annotations
import json, os, time
from dataclasses import dataclass, asdict
from typing import Optional

@dataclass
class TurnMetrics:
    ts: float
    template: str
    message_count: int
    prompt_chars: int
    latency_ms: int
    error: bool = False
    error_reason: str = ""

class MetricsLogger:
    """Append-only JSONL sink; a falsy path disables it."""
    def __init__(self, path: Optional[str] = "results/metrics.jsonl") -> None:
        self.path = path or None
        if self.path:
            os.makedirs(os.path.dirname(self.path) or ".", exist_ok=True)

    @property
    def enabled(self) -> bool:
        return self.path is not None

    def log(self, m: TurnMetrics) -> None:
        if not self.path:
            return
        with open(self.path, "a", encoding="utf-8") as f:
            f.write(json.dumps(asdict(m)) + "\n")

class Timer:
    def __enter__(self):
        self.start = time.time()
        self.end = None
        return self
    def __exit__(self, exc_type, exc, tb):
        self.end = time.time()
    @property
    def ms(self) -> int:
        end = self.end if self.end is not None else time.time()
        return int((end - self.start) * 1000)
