import json
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple, Union

HeadersInput = Union[Mapping[str, Any], Iterable[Tuple[str, Any]]]


def _header_value(value: Any) -> str:
    # Match what the browser sends for a JSON header literal: true / null
    if isinstance(value, bool) or value is None:
        return json.dumps(value)
    if isinstance(value, (str, int, float)):
        return str(value)
    raise ValueError(f"header value {value!r} is not a string or scalar")


def normalize_headers(headers: Optional[HeadersInput]) -> Dict[str, str]:
    """Collapse a mapping, a list of (key, value) pairs or a header collection
    (e.g. starlette's ``Headers``) into a plain dict.

    Later entries win when a key repeats.
    """
    if headers is None:
        return {}
    if isinstance(headers, (str, bytes)):
        raise ValueError("headers must be a mapping or a list of key/value pairs")
    if isinstance(headers, Mapping) or hasattr(headers, "items"):
        items = headers.items()
    else:
        items = headers

    normalized: Dict[str, str] = {}
    for pair in items:
        if not isinstance(pair, (list, tuple)) or len(pair) != 2:
            raise ValueError(f"header entry {pair!r} is not a key/value pair")
        key, value = pair
        normalized[str(key)] = _header_value(value)
    return normalized
