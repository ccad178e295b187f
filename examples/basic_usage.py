#!/usr/bin/env python3
"""Basic usage example for iotdiff.

This example demonstrates:
1. Building a device snapshot
2. Encoding a stream of snapshots through one session
3. Decoding them in order through a peer session
4. Comparing message sizes
"""

from __future__ import annotations

from uuid import UUID

from iotdiff import (
    DeviceSnapshot,
    PhysicalValue,
    SnapshotCodec,
    max_encoded_size,
    min_encoded_size,
)

DEVICE_ID = UUID("0f8fad5b-d9cb-469f-a165-70867728950e")


def make_snapshot(uptime: int, temperature: float, status: str = "ALL SYST EMS") -> DeviceSnapshot:
    """Build a snapshot of the demo device."""
    return DeviceSnapshot(
        name="HEATPUMP",
        identifier=DEVICE_ID,
        status_message=status,
        self_check_passed=True,
        service_mode_enabled=False,
        uptime_seconds=uptime,
        pressure=PhysicalValue(value=1.8, unit="bar"),
        temperature=PhysicalValue(value=temperature, unit="°C"),
        distance=PhysicalValue(value=0.35, unit="m"),
    )


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("iotdiff Basic Usage Example")
    print("=" * 60)
    print()

    snapshots = [
        make_snapshot(3600, 21.5),
        make_snapshot(3660, 21.5),
        make_snapshot(3720, 22.0),
        make_snapshot(3780, 22.0, "LOW BATT ERY"),
    ]

    device = SnapshotCodec()
    gateway = SnapshotCodec()

    print("1. Size bounds...")
    print(f"   First snapshot: {max_encoded_size()} bytes")
    print(f"   Nothing changed: {min_encoded_size()} bytes")
    print()

    print("2. Encoding and decoding a stream...")
    for i, snapshot in enumerate(snapshots, 1):
        frame = device.encode(snapshot)
        decoded = gateway.decode(frame)
        json_size = len(snapshot.model_dump_json().encode("utf-8"))

        print(f"   #{i}: {len(frame):2d} bytes (JSON {json_size} bytes)  hex={frame.hex()}")
        print(
            f"       uptime={decoded.uptime_seconds}s "
            f"temperature={decoded.temperature.value:.2f}{decoded.temperature.unit} "
            f"status='{decoded.status_message}'"
        )
    print()

    print("=" * 60)
    print("Example complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
