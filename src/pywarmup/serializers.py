"""Serialization and deserialization of Warmup API payloads.

This module provides stateless functions for converting between typed domain
models and the JSON bodies exchanged with the Warmup API. Both the
authentication handler and the client use it, so request shapes live in one
place.

Design Philosophy:
    - Stateless functions (no classes, no state)
    - Single responsibility (wire format only)
    - Undecodable bodies surface as ApiCallError, like any other failed call
"""

from __future__ import annotations

import json
import math
from decimal import Decimal
from typing import Any

from pywarmup.const import TEMPERATURE_SCALE
from pywarmup.exceptions import ApiCallError
from pywarmup.models import AuthResponse, Credentials, Location, QueryResponse, Room, Thermostat


STATUS_QUERY = (
    "query QUERY { user { locations{ id name "
    " rooms { id roomName runMode overrideDur targetTemp currentTemp "
    " thermostat4ies{ deviceSN }}}}}"
)


def _loads(text: str) -> dict[str, Any]:
    """Parse a response body into a JSON object.

    Raises:
        ApiCallError: If the body is not a JSON object.
    """
    try:
        data = json.loads(text)
    except (TypeError, json.JSONDecodeError) as exc:
        msg = f"Invalid JSON response from API: {exc}"
        raise ApiCallError(msg) from exc

    if not isinstance(data, dict):
        msg = f"Unexpected response from API: {type(data).__name__}"
        raise ApiCallError(msg)
    return data


# -------------------------------------------------------------------------
# Authentication
# -------------------------------------------------------------------------


def serialize_auth_request(credentials: Credentials) -> str:
    """Serialize credentials into an authentication request body.

    Args:
        credentials: Account credentials.

    Returns:
        JSON string in format:
        {"request": {"email": str, "password": str, "method": str, "appId": str}}
    """
    return json.dumps(
        {
            "request": {
                "email": credentials.username,
                "password": credentials.password,
                "method": credentials.method,
                "appId": credentials.app_id,
            }
        }
    )


def deserialize_auth_response(text: str) -> AuthResponse:
    """Deserialize an authentication response body.

    Args:
        text: Raw body in format:
              {"status": {"result": str}, "response": {"token": str}}

    Returns:
        AuthResponse instance. A missing result is treated as an empty string.

    Raises:
        ApiCallError: If the body is not valid JSON.

    Example:
        >>> body = '{"status": {"result": "success"}, "response": {"token": "abc"}}'
        >>> deserialize_auth_response(body).token
        'abc'
    """
    data = _loads(text)
    status = data.get("status") or {}
    response = data.get("response") or {}

    return AuthResponse(
        result=str(status.get("result", "")) if isinstance(status, dict) else "",
        token=response.get("token") if isinstance(response, dict) else None,
    )


# -------------------------------------------------------------------------
# Queries and mutations
# -------------------------------------------------------------------------


def serialize_query(query: str) -> str:
    """Wrap a GraphQL-style query string into a request body.

    Args:
        query: Query or mutation string.

    Returns:
        JSON string in format: {"query": str}
    """
    return json.dumps({"query": query})


def decode_temperature(value: Any) -> float | None:
    """Convert a vendor temperature (tenths of a degree) to degrees.

    Args:
        value: Raw temperature value, e.g. 215.

    Returns:
        Temperature in degrees (e.g. 21.5), or None if not a finite number.
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        tenths = Decimal(str(value))
    except ArithmeticError:
        return None
    if not tenths.is_finite():
        return None
    return float(tenths / TEMPERATURE_SCALE)


def encode_temperature(value: float | Decimal) -> int:
    """Convert degrees to the vendor's fixed-point integer representation.

    The value is scaled by ten and truncated toward zero. Decimal arithmetic
    keeps values such as 20.3 from encoding to 202.

    Args:
        value: Temperature in degrees.

    Returns:
        Temperature in tenths of a degree.

    Example:
        >>> encode_temperature(21.5)
        215
    """
    return int(Decimal(str(value)) * TEMPERATURE_SCALE)


def _deserialize_room(data: dict[str, Any]) -> Room:
    override = data.get("overrideDur")
    return Room(
        id=str(data.get("id", "")),
        name=data.get("roomName") or "",
        run_mode=data.get("runMode"),
        override_duration=int(override) if isinstance(override, int | float) and math.isfinite(override) else None,
        target_temperature=decode_temperature(data.get("targetTemp")),
        current_temperature=decode_temperature(data.get("currentTemp")),
        thermostats=[
            Thermostat(device_sn=str(device["deviceSN"]))
            for device in data.get("thermostat4ies") or []
            if isinstance(device, dict) and device.get("deviceSN") is not None
        ],
    )


def _deserialize_location(data: dict[str, Any]) -> Location:
    return Location(
        id=str(data.get("id", "")),
        name=data.get("name") or "",
        rooms=[_deserialize_room(room) for room in data.get("rooms") or [] if isinstance(room, dict)],
    )


def deserialize_query_response(text: str) -> QueryResponse:
    """Deserialize a query/mutation response body.

    Location data is only present for status queries; mutation responses
    yield an empty location list.

    Args:
        text: Raw body in format:
              {"status": str, "data": {"user": {"locations": [...]}}}

    Returns:
        QueryResponse instance with parsed locations and the raw data.

    Raises:
        ApiCallError: If the body is not valid JSON.
    """
    data = _loads(text)
    payload = data.get("data") or {}
    user = (payload.get("user") or {}) if isinstance(payload, dict) else {}
    locations = (user.get("locations") or []) if isinstance(user, dict) else []

    return QueryResponse(
        status=str(data.get("status", "")),
        locations=[_deserialize_location(location) for location in locations if isinstance(location, dict)],
        raw_data=data,
    )


def build_status_query() -> str:
    """Build the query for all locations, rooms, and thermostats of the account."""
    return STATUS_QUERY


def build_override_mutation(location_id: str, room_id: str, temperature: float | Decimal, duration: int) -> str:
    """Build a mutation setting a temperature override on a room.

    Args:
        location_id: Location identifier.
        room_id: Room identifier.
        temperature: Override temperature in degrees.
        duration: Override duration in minutes.

    Returns:
        Mutation string, e.g.
        "mutation{deviceOverride(lid:1,rid:2,temperature:215,minutes:60)}"
    """
    return (
        f"mutation{{deviceOverride(lid:{location_id},rid:{room_id},"
        f"temperature:{encode_temperature(temperature)},minutes:{int(duration)})}}"
    )


def build_frost_protection_mutation(location_id: str, room_id: str, command: bool) -> str:
    """Build a mutation toggling frost protection on a room.

    Args:
        location_id: Location identifier.
        room_id: Room identifier.
        command: Current frost protection state. When on, the mutation turns
            it off; when off, it turns it on.

    Returns:
        Mutation string, e.g. "mutation{turnOff(lid:1,rid:2){id}}"
    """
    operation = "turnOff" if command else "turnOn"
    return f"mutation{{{operation}(lid:{location_id},rid:{room_id}){{id}}}}"
