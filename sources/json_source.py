"""Load property records and criteria from JSON files, and write scored results."""

import json
import logging
from pathlib import Path
from typing import Sequence

from pydantic import TypeAdapter, ValidationError

from models.criteria import WeightedCriteria
from models.property import Property, ScoredProperty

logger = logging.getLogger(__name__)

_properties_adapter = TypeAdapter(list[Property])


class PropertySourceError(Exception):
    """A property file is missing or does not match the record schema."""


class CriteriaError(Exception):
    """A criteria request is missing or malformed."""


def load_properties(path: str | Path) -> list[Property]:
    """Read a JSON list of properties, or an API-style {"properties": [...]} envelope."""
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise PropertySourceError(f"Cannot read {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise PropertySourceError(f"{path} is not valid JSON: {e}") from e

    if isinstance(data, dict) and "properties" in data:
        data = data["properties"]

    try:
        properties = _properties_adapter.validate_python(data)
    except ValidationError as e:
        raise PropertySourceError(f"{path} has invalid property records: {e}") from e

    logger.info(f"Loaded {len(properties)} properties from {path}")
    return properties


def load_criteria(path: str | Path) -> WeightedCriteria:
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise CriteriaError(f"Cannot read {path}: {e}") from e

    try:
        return WeightedCriteria.from_json(raw)
    except ValidationError as e:
        raise CriteriaError(f"{path} is not a valid criteria request: {e}") from e


def dump_scored(scored: Sequence[ScoredProperty], path: str | Path) -> None:
    """Write scored properties in the {"properties": [...], "count": n} shape."""
    path = Path(path)
    payload = {
        "properties": [
            s.model_dump(mode="json", by_alias=True) for s in scored
        ],
        "count": len(scored),
    }
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    logger.info(f"Wrote {len(scored)} scored properties to {path}")
