"""
Permissible concentration table used by every index
"""
import json
import math
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from config.constants import FALLBACK_STANDARD, WHO_STANDARDS
from config.logging_config import get_logger

logger = get_logger(__name__)


class StandardsTable:
    """
    Immutable metal symbol -> permissible concentration (mg/L) mapping.

    Symbols are case-sensitive. Metals without an entry resolve to
    ``FALLBACK_STANDARD`` instead of failing, so an unknown column still
    contributes a (low-confidence) sub-index.
    """

    def __init__(self, values: Mapping[str, float]):
        validated: Dict[str, float] = {}
        for metal, raw_value in values.items():
            if isinstance(raw_value, bool):
                raise ValueError(f"Standard for '{metal}' is not a number: {raw_value!r}")
            try:
                value = float(raw_value)
            except (TypeError, ValueError) as error:
                raise ValueError(f"Standard for '{metal}' is not a number: {raw_value!r}") from error

            if not math.isfinite(value) or value <= 0:
                raise ValueError(f"Standard for '{metal}' must be a positive number, got {raw_value!r}")

            validated[str(metal)] = value

        self._values = MappingProxyType(validated)

    @classmethod
    def default(cls) -> "StandardsTable":
        return cls(WHO_STANDARDS)

    @classmethod
    def from_json(cls, path: Path) -> "StandardsTable":
        """Load a replacement table from a JSON object of symbol -> mg/L."""
        try:
            with open(path, "r", encoding="utf-8") as handle:
                payload = json.load(handle)
        except (OSError, json.JSONDecodeError) as error:
            raise ValueError(f"Failed to read standards file {path}: {error}") from error

        if not isinstance(payload, dict):
            raise ValueError(f"Standards file {path} must contain a JSON object")

        table = cls(payload)
        logger.info("Loaded %s metal standards from %s", len(table), path)
        return table

    def lookup(self, metal: str) -> float:
        return self._values.get(metal, FALLBACK_STANDARD)

    def missing(self, metals) -> list[str]:
        """Metals that would fall back to the default standard."""
        return [metal for metal in metals if metal not in self._values]

    def as_dict(self) -> Dict[str, float]:
        return dict(self._values)

    def __contains__(self, metal: object) -> bool:
        return metal in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"StandardsTable({dict(self._values)!r})"


def load_standards(standards_file: Optional[Path] = None) -> StandardsTable:
    """Configured table: the JSON file when given, WHO defaults otherwise."""
    if standards_file is None:
        return StandardsTable.default()
    return StandardsTable.from_json(standards_file)
