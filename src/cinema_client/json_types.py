"""Type aliases for JSON payloads exchanged with the booking service.

Response bodies are handed back to callers as plain JSON values; pydantic stays at
the request-building boundary.
"""

from __future__ import annotations

from typing import TypeAlias

JsonPrimitive: TypeAlias = str | int | float | bool | None
JsonValue: TypeAlias = JsonPrimitive | list["JsonValue"] | dict[str, "JsonValue"]
JsonObject: TypeAlias = dict[str, JsonValue]

__all__ = [
    "JsonObject",
    "JsonPrimitive",
    "JsonValue",
]
