"""Abstract interface for flight schedule sources."""

import json
from typing import Any, List, Mapping, Optional, Protocol, runtime_checkable

from rotorschedule.flights.errors import ParseFieldError, SourceFetchError
from rotorschedule.flights.models import CommonFlight
from rotorschedule.reference.operators import Operator


@runtime_checkable
class SourceAdapter(Protocol):
    """Protocol for pluggable schedule sources."""

    operator: Operator

    async def fetch(self) -> List[CommonFlight]:
        """Fetch today's flights. Never raises: a failing source returns []."""
        ...


def decode_json_list(body: bytes, source: str) -> List[Any]:
    """Decode a JSON array payload, raising SourceFetchError otherwise."""
    try:
        data = json.loads(body)
    except (UnicodeDecodeError, ValueError) as e:
        raise SourceFetchError(source, f"invalid JSON payload ({e})") from e
    if not isinstance(data, list):
        raise SourceFetchError(source, f"expected a JSON array, got {type(data).__name__}")
    return data


def require_str(item: Mapping[str, Any], key: str) -> str:
    """Return item[key] as a string, raising ParseFieldError if missing or not a string."""
    value = item.get(key)
    if not isinstance(value, str):
        raise ParseFieldError(key, value)
    return value


def optional_str(item: Mapping[str, Any], key: str) -> Optional[str]:
    """Return item[key] if it is a string, else None."""
    value = item.get(key)
    return value if isinstance(value, str) else None
