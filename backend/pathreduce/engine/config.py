"""Reducer configuration — controls arc subdivision and degeneracy checks."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ReducerConfig:
    """Knobs for the normalization stage."""

    # Largest sweep covered by a single cubic when approximating an arc
    arc_max_segment_degrees: float = 90.0

    # Arc endpoints closer than this to the cursor are treated as coincident
    tolerance: float = 1e-9

    def __post_init__(self) -> None:
        if not 0.0 < self.arc_max_segment_degrees <= 180.0:
            raise ValueError(
                f"arc_max_segment_degrees must be in (0, 180], got {self.arc_max_segment_degrees}"
            )
        if self.tolerance < 0.0:
            raise ValueError(f"tolerance must be non-negative, got {self.tolerance}")
