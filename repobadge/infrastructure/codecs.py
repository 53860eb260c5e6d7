"""
Numeric and JSON codecs used by badge and statistics collaborators.

Each helper reports failure as an ``Err`` holding the adapted upstream
exception instead of raising. Code that needs JSON text goes through
encode_json rather than calling json.dumps directly.
"""

import json
from typing import Any

from repobadge.domain.errors import SerialError
from repobadge.domain.result import Err, Ok, Result
from repobadge.shared.errors.conversions import capture


@capture
def parse_int(text: str) -> int:
    """Parse a base-10 integer, e.g. a commit count from ``git rev-list``."""
    return int(text.strip(), 10)


@capture
def decode_json(payload: str | bytes) -> Any:
    """Decode a JSON document received from a dependency or read from disk."""
    return json.loads(payload)


def encode_json(value: Any) -> Result[str]:
    """Encode ``value`` as compact JSON.

    The encoder reports unserializable input with a bare TypeError, and
    circular references with a bare ValueError. Neither type means
    "serialization failed" outside this call, so both are wrapped here.
    """
    try:
        return Ok(json.dumps(value, separators=(",", ":")))
    except (TypeError, ValueError) as exc:
        return Err(SerialError(exc))
