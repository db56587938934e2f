from __future__ import annotations

from .metrics import RoundMetrics
from .snapshot import Snapshot


class Reporter:
    """Sink for read-only simulation output. Subclasses override what they need."""

    def on_round(self, metrics: RoundMetrics) -> None:
        pass

    def on_snapshot(self, snapshot: Snapshot) -> None:
        pass

    def on_extinction(self, round_number: int) -> None:
        pass

    def close(self) -> None:
        pass
