# ─────────────────────────────────────────────────────────────────────────────
# Generation Metrics — thread-safe outcome tracking
# ─────────────────────────────────────────────────────────────────────────────
# Per-kind counts of successes and of each failure class, plus a bounded
# latency history (deque(maxlen=1000), oldest auto-evicted).
# Exposed via GET /metrics and mirrored by GET /metrics/prometheus.
# ─────────────────────────────────────────────────────────────────────────────

from __future__ import annotations

import threading
import time
from collections import Counter, deque
from dataclasses import dataclass, field
from typing import Any

OUTCOMES = ("success", "validation_failed", "decode_failed", "transport_failed")


@dataclass
class GenerationMetrics:
    """Thread-safe generation outcome metrics."""

    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    requests_total: int = 0
    rate_limited_total: int = 0
    batch_total_failures: int = 0

    _outcomes: Counter[tuple[str, str]] = field(default_factory=Counter, repr=False)
    _latency_history: deque[float] = field(default_factory=lambda: deque(maxlen=1000), repr=False)
    _start_time: float = field(default_factory=time.time, repr=False)

    def record_request(self) -> None:
        """Count one admitted generation request (single or batch)."""
        with self._lock:
            self.requests_total += 1

    def record_rate_limited(self) -> None:
        with self._lock:
            self.rate_limited_total += 1

    def record_batch_failure(self) -> None:
        with self._lock:
            self.batch_total_failures += 1

    def record_outcome(self, kind: str, outcome: str, latency_ms: float) -> None:
        """Record one generator call. outcome is one of OUTCOMES."""
        if outcome not in OUTCOMES:
            raise ValueError(f"Unknown outcome '{outcome}'")
        with self._lock:
            self._outcomes[(kind, outcome)] += 1
            self._latency_history.append(latency_ms)

    def outcome_count(self, kind: str, outcome: str) -> int:
        with self._lock:
            return self._outcomes[(kind, outcome)]

    def to_dict(self) -> dict[str, Any]:
        """Serialize metrics for the /metrics endpoint."""
        with self._lock:
            latencies = sorted(self._latency_history)
            n = len(latencies)
            by_kind: dict[str, dict[str, int]] = {}
            for (kind, outcome), count in sorted(self._outcomes.items()):
                by_kind.setdefault(kind, dict.fromkeys(OUTCOMES, 0))[outcome] = count
            return {
                "requests_total": self.requests_total,
                "rate_limited_total": self.rate_limited_total,
                "batch_total_failures": self.batch_total_failures,
                "generations": by_kind,
                "latency_p50_ms": round(latencies[n // 2], 1) if n else 0,
                "latency_p95_ms": round(latencies[int(n * 0.95)], 1) if n else 0,
                "latency_mean_ms": round(sum(latencies) / n, 1) if n else 0,
                "uptime_seconds": int(time.time() - self._start_time),
            }
