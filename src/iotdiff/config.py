"""Configuration for a differential codec session.

Field widths are fixed by the wire layout and are not configurable. The
tolerance only affects encoding and the unit labels only affect decoding.
"""

from __future__ import annotations

from dataclasses import dataclass

from .models.snapshot import DISTANCE_UNIT, PRESSURE_UNIT, TEMPERATURE_UNIT


@dataclass(frozen=True)
class CodecConfig:
    """Configuration for SnapshotCodec.

    Attributes:
        tolerance: Relative tolerance for the measurement "unchanged" test
            (default 1e-6). A reading is unchanged when
            ``abs(previous - current) <= abs(previous) * tolerance``.

        pressure_unit: Unit label attached to decoded pressure (default "bar")
        temperature_unit: Unit label attached to decoded temperature (default "°C")
        distance_unit: Unit label attached to decoded distance (default "m")

    Examples:
        ```python
        from iotdiff import CodecConfig, SnapshotCodec

        # Coarser change detection on the sending side
        codec = SnapshotCodec(CodecConfig(tolerance=1e-3))

        # Imperial units on the receiving side
        codec = SnapshotCodec(CodecConfig(pressure_unit="psi", distance_unit="ft"))
        ```
    """

    # Change detection
    tolerance: float = 1e-6

    # Decoded unit labels
    pressure_unit: str = PRESSURE_UNIT
    temperature_unit: str = TEMPERATURE_UNIT
    distance_unit: str = DISTANCE_UNIT

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if not 0.0 <= self.tolerance < 1.0:
            raise ValueError(f"tolerance must be 0.0-1.0 (exclusive), got {self.tolerance}")
