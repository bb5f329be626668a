"""Tests for pywarmup data models."""

from __future__ import annotations

import dataclasses

import pytest

from pywarmup.models import AuthResponse, Credentials, Location, QueryResponse, Room, Thermostat


@pytest.fixture
def query_response() -> QueryResponse:
    """Create a response with two locations."""
    return QueryResponse(
        status="success",
        locations=[
            Location(id="1", name="Home", rooms=[Room(id="10", name="Lounge"), Room(id="11", name="Hall")]),
            Location(id="2", name="Cottage", rooms=[Room(id="10", name="Kitchen")]),
        ],
    )


class TestCredentials:
    """Test Credentials dataclass."""

    def test_defaults(self) -> None:
        """Test default login method and app identifier."""
        credentials = Credentials("user@example.com", "secret")

        assert credentials.method == "userLogin"
        assert credentials.app_id == "WARMUP-APP-V001"

    def test_immutable(self) -> None:
        """Test that credentials cannot be modified once captured."""
        credentials = Credentials("user@example.com", "secret")

        with pytest.raises(dataclasses.FrozenInstanceError):
            credentials.password = "other"  # type: ignore[misc]


class TestAuthResponse:
    """Test AuthResponse dataclass."""

    def test_is_success(self) -> None:
        """Test success detection is exact."""
        assert AuthResponse(result="success", token="abc").is_success is True
        assert AuthResponse(result="Success").is_success is False


class TestQueryResponse:
    """Test QueryResponse helpers."""

    def test_rooms_flattened(self, query_response: QueryResponse) -> None:
        """Test rooms across all locations."""
        assert [room.name for room in query_response.rooms] == ["Lounge", "Hall", "Kitchen"]

    def test_get_room(self, query_response: QueryResponse) -> None:
        """Test lookup is scoped to the location."""
        room = query_response.get_room("2", "10")

        assert room is not None
        assert room.name == "Kitchen"

    def test_get_room_missing(self, query_response: QueryResponse) -> None:
        """Test lookup of an unknown room."""
        assert query_response.get_room("1", "99") is None
        assert query_response.get_room("3", "10") is None

    def test_serial_numbers(self) -> None:
        """Test thermostat serial numbers of a room."""
        room = Room(id="10", name="Lounge", thermostats=[Thermostat("A1"), Thermostat("B2")])

        assert room.serial_numbers == ["A1", "B2"]
