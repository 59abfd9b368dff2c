"""Location extraction from the incoming request's query string."""

from typing import Mapping, Optional

DEFAULT_LOCATION = "London"


def resolve_location(query_params: Mapping[str, str], default: Optional[str] = None) -> str:
    """Return the `location` parameter, or the default when it is absent or empty.

    The value is not trimmed or validated.
    """
    location = query_params.get("location")
    if location:
        return location
    return default or DEFAULT_LOCATION
