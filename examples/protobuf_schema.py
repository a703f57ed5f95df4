#!/usr/bin/env python3
"""Protobuf schema generation example for pyd2proto.

This example demonstrates:
1. Generating a .proto schema from nested Pydantic models
2. Prefixing generated type names
3. Qualified names for fields that share a key
"""

from __future__ import annotations

import datetime
import enum
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, Field

from pyd2proto import Int64, ProtoOptions, to_proto_schema


class MissionPhase(enum.Enum):
    """Mission phase enumeration."""

    STARTUP = 1
    TRANSIT = 2
    SURVEY = 3
    RETURN = 4
    SHUTDOWN = 5


class Location(BaseModel):
    """Geographic position."""

    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)


class Sensor(BaseModel):
    """Sensor reading."""

    name: str
    reading: float
    location: Location


class UnderwaterVehicleStatus(BaseModel):
    """Complete underwater vehicle status message."""

    vehicle_id: int = Field(ge=0, le=255, description="Unique vehicle identifier")
    mission_phase: MissionPhase
    mission_time_ms: int = Int64(description="Mission elapsed time in milliseconds")
    reported_at: datetime.datetime
    location: Location
    heading_range: Tuple[float, float]
    sensors: List[Sensor]
    counters: Dict[str, int]
    operator_note: Optional[str] = None


def main() -> None:
    """Run the protobuf schema generation example."""
    print("=" * 60)
    print("pyd2proto Protobuf Schema Generation Example")
    print("=" * 60)
    print()

    print("1. Generating .proto schema...")
    options = ProtoOptions(
        package_name="underwater.messages",
        root_message_name="VehicleStatus",
    )
    proto_schema = to_proto_schema(UnderwaterVehicleStatus, options)

    print()
    print(proto_schema)
    print()

    # Location is used at two depths; key-only naming registers it twice
    print("2. Generating with qualified names and a type prefix...")
    qualified = to_proto_schema(
        UnderwaterVehicleStatus,
        options,
        type_prefix="Uw",
        qualify_names=True,
    )

    print()
    print(qualified)
    print()

    output_file = "underwater_vehicle_status.proto"
    print(f"3. Saving schema to {output_file}...")

    with open(output_file, "w") as f:
        f.write(qualified + "\n")

    print(f"   Schema saved to {output_file}")
    print()
    print("=" * 60)
    print("Example complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
