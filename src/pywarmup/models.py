"""Data models for Warmup API requests and responses."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pywarmup.const import AUTH_APP_ID, AUTH_METHOD, STATUS_SUCCESS


__all__ = [
    "AuthResponse",
    "AuthState",
    "Credentials",
    "Location",
    "QueryResponse",
    "Room",
    "Thermostat",
]


class AuthState(Enum):
    """Outcome of a session check."""

    AUTHENTICATED = "authenticated"  # Token held, calls may proceed
    PENDING = "pending"  # No token yet, try again on the next call


@dataclass(frozen=True)
class Credentials:
    """Account credentials used to obtain a session token.

    Attributes:
        username: Account email address.
        password: Account password.
        method: Login method expected by the auth endpoint.
        app_id: Application identifier expected by the auth endpoint.
    """

    username: str
    password: str = field(repr=False)
    method: str = AUTH_METHOD
    app_id: str = AUTH_APP_ID


@dataclass
class AuthResponse:
    """Response from the authentication endpoint.

    Attributes:
        result: Application-level result string ("success" on success).
        token: Session token, present only on success.
    """

    result: str
    token: str | None = None

    @property
    def is_success(self) -> bool:
        """Check if the endpoint reported success."""
        return self.result == STATUS_SUCCESS


@dataclass
class Thermostat:
    """Thermostat device attached to a room."""

    device_sn: str


@dataclass
class Room:
    """Room state from the status query.

    Temperatures are in degrees Celsius, decoded from the vendor's tenths.

    Attributes:
        id: Room identifier.
        name: Human-readable room name.
        run_mode: Current run mode (e.g. "schedule", "override", "frost").
        override_duration: Remaining override duration in minutes.
        target_temperature: Target temperature.
        current_temperature: Measured temperature.
        thermostats: Thermostat devices in the room.
    """

    id: str
    name: str
    run_mode: str | None = None
    override_duration: int | None = None
    target_temperature: float | None = None
    current_temperature: float | None = None
    thermostats: list[Thermostat] = field(default_factory=list)

    @property
    def serial_numbers(self) -> list[str]:
        """Get serial numbers of the room's thermostats."""
        return [thermostat.device_sn for thermostat in self.thermostats]


@dataclass
class Location:
    """Location (home) grouping rooms."""

    id: str
    name: str
    rooms: list[Room] = field(default_factory=list)


@dataclass
class QueryResponse:
    """Response from the query/mutation endpoint.

    Attributes:
        status: Application-level status string ("success" on success).
        locations: Locations returned by a status query (empty for mutations).
        raw_data: Original API response data for debugging.
    """

    status: str
    locations: list[Location] = field(default_factory=list)
    raw_data: dict[str, Any] = field(default_factory=dict)

    @property
    def is_success(self) -> bool:
        """Check if the endpoint reported success."""
        return self.status == STATUS_SUCCESS

    @property
    def rooms(self) -> list[Room]:
        """Get all rooms across all locations."""
        return [room for location in self.locations for room in location.rooms]

    def get_room(self, location_id: str, room_id: str) -> Room | None:
        """Find a room by location and room ID.

        Args:
            location_id: Location identifier.
            room_id: Room identifier.

        Returns:
            The matching Room, or None if not present.
        """
        for location in self.locations:
            if location.id != location_id:
                continue
            for room in location.rooms:
                if room.id == room_id:
                    return room
        return None
