"""Base class for state codecs, plus the field decoders they share.

A codec maps a store state to a JSON-safe payload and back, one known
field at a time. Decoders raise DecodeError (or a domain ValidationError
from the value objects) on anything malformed; the adapter turns either
into a fail-open empty load.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, Generic, TypeVar

from storefront.domain.model.value_objects import Money

S = TypeVar("S")


class DecodeError(ValueError):
    """A persisted payload does not match the expected shape."""


class StateCodec(ABC, Generic[S]):

    @abstractmethod
    def encode(self, state: S) -> dict[str, Any]:
        """Return a JSON-safe payload for ``state``."""

    @abstractmethod
    def decode(self, payload: dict[str, Any]) -> S:
        """Rebuild a state from a payload produced by ``encode``."""


# --- Shared field codecs ------------------------------------------------------


def encode_money(value: Money) -> str:
    return str(value.amount)


def decode_money(raw: Any, currency: str = "USD") -> Money:
    if isinstance(raw, bool) or not isinstance(raw, (str, int, float)):
        raise DecodeError(f"Expected a money amount, got {raw!r}")
    return Money.of(raw, currency)


def encode_timestamp(value: datetime) -> str:
    """``YYYY-MM-DDTHH:MM:SS.sssZ`` in UTC."""
    utc = value.astimezone(timezone.utc)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"


def decode_timestamp(raw: Any) -> datetime:
    """Accept an ISO-8601 string (``Z`` or offset) or epoch milliseconds."""
    if isinstance(raw, bool):
        raise DecodeError(f"Expected a timestamp, got {raw!r}")
    if isinstance(raw, (int, float)):
        return datetime.fromtimestamp(raw / 1000, tz=timezone.utc)
    if not isinstance(raw, str):
        raise DecodeError(f"Expected a timestamp, got {raw!r}")
    text = raw[:-1] + "+00:00" if raw.endswith("Z") else raw
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError as exc:
        raise DecodeError(f"Invalid timestamp: {raw!r}") from exc
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def require(raw: dict[str, Any], key: str, kind: type | tuple[type, ...]) -> Any:
    """Fetch ``raw[key]`` and check its JSON type."""
    if key not in raw:
        raise DecodeError(f"Missing field {key!r}")
    value = raw[key]
    if not isinstance(value, kind) or (isinstance(value, bool) and kind is not bool):
        raise DecodeError(f"Field {key!r} has unexpected value {value!r}")
    return value


def require_list(raw: Any, key: str) -> list[Any]:
    if not isinstance(raw, dict):
        raise DecodeError(f"Expected an object holding {key!r}, got {type(raw).__name__}")
    return require(raw, key, list)


def stringify_amount(raw: dict[str, Any], key: str) -> None:
    """Rewrite a numeric amount under ``key`` as a decimal string, in place."""
    value = raw.get(key)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        raw[key] = str(value)
