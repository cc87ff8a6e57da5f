"""
Field-match specifications and their parsing from script parameters.

A query carries its specs under the ``matchers`` parameter::

    {"matchers": [
        {"field": "name", "value": "Jane Doe", "matcher": "jaro-winkler",
         "high": 0.9, "low": 0.1},
        ...
    ]}

Parsing happens once per query, before any document is scored, so a bad
entry fails the query instead of a single document.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Tuple

from .errors import InvalidConfiguration, MissingParameter

logger = logging.getLogger(__name__)

MATCHERS = "matchers"

FIELD = "field"
VALUE = "value"
MATCHER = "matcher"
HIGH = "high"
LOW = "low"
REQUIRED_KEYS = (FIELD, VALUE, MATCHER, HIGH, LOW)


@dataclass(frozen=True)
class FieldMatchSpec:
    """One comparison: a document field, the value to match it against and how.

    `low` and `high` clamp the raw similarity before fusion. They are not
    checked against each other; with ``low > high`` every score clamps to
    `high`.
    """

    field_name: str
    reference_value: str
    matcher_name: str
    high: float
    low: float

    def clamp(self, raw: float) -> float:
        return min(max(raw, self.low), self.high)


def _bound(entry: Mapping[str, Any], key: str) -> float:
    value = entry[key]
    try:
        return float(value)
    except (TypeError, ValueError):
        raise InvalidConfiguration(
            key, f"Invalid matcher configuration. [{key}] must be a number, got {value!r}."
        ) from None


def parse_field_spec(entry: Mapping[str, Any]) -> FieldMatchSpec:
    """Build a `FieldMatchSpec` from one ``matchers`` entry.

    Raises `InvalidConfiguration` naming the first missing key, checked in the
    order field, value, matcher, high, low.
    """
    if not isinstance(entry, Mapping):
        raise InvalidConfiguration(
            MATCHERS, f"Invalid matcher configuration. Expected an object, got {entry!r}."
        )
    for key in REQUIRED_KEYS:
        if key not in entry:
            raise InvalidConfiguration(key)

    return FieldMatchSpec(
        field_name=str(entry[FIELD]),
        reference_value=str(entry[VALUE]),
        matcher_name=str(entry[MATCHER]),
        high=_bound(entry, HIGH),
        low=_bound(entry, LOW),
    )


def parse_field_specs(params: Mapping[str, Any]) -> Tuple[FieldMatchSpec, ...]:
    """Parse every entry of ``params["matchers"]``, keeping their order."""
    if MATCHERS not in params:
        raise MissingParameter(MATCHERS)

    specs = tuple(parse_field_spec(entry) for entry in params[MATCHERS])
    logger.debug("Parsed %d field-match specs", len(specs))
    return specs
