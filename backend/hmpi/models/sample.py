"""
Input rows and the metal column set derived from them
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple

from config.constants import ID_KEY, LATITUDE_KEYS, LONGITUDE_KEYS
from hmpi.models.common import coerce_optional, coerce_or_default, format_identifier, is_missing


def normalize_key(key: Any) -> str:
    return str(key).strip().lower()


@dataclass(frozen=True)
class RawSample:
    """
    One input row: column name -> scalar, in the order the columns arrived.

    ``index`` is the 0-based position of the row in its batch.
    """

    index: int
    values: Mapping[str, Any]
    _keys_by_name: Dict[str, str] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        keys_by_name: Dict[str, str] = {}
        for key in self.values:
            keys_by_name.setdefault(normalize_key(key), key)
        object.__setattr__(self, "_keys_by_name", keys_by_name)

    @property
    def columns(self) -> Tuple[str, ...]:
        return tuple(self.values.keys())

    @property
    def label(self) -> str:
        return f"Sample {self.index + 1}"

    def lookup(self, name: str) -> Any:
        """Value of a column matched case-insensitively, or None."""
        key = self._keys_by_name.get(normalize_key(name))
        return None if key is None else self.values[key]

    def first_present(self, *names: str) -> Any:
        for name in names:
            value = self.lookup(name)
            if not is_missing(value):
                return value
        return None

    def concentration(self, metal: str) -> float:
        return coerce_or_default(self.values.get(metal))

    def identifier(self) -> str:
        value = self.lookup(ID_KEY)
        if is_missing(value):
            return self.label
        return format_identifier(value) or self.label

    def latitude(self) -> Optional[float]:
        return coerce_optional(self.first_present(*LATITUDE_KEYS))

    def longitude(self) -> Optional[float]:
        return coerce_optional(self.first_present(*LONGITUDE_KEYS))


@dataclass(frozen=True)
class MetalColumnSet:
    """Ordered metal columns detected once per batch."""

    columns: Tuple[str, ...] = ()

    def __iter__(self) -> Iterator[str]:
        return iter(self.columns)

    def __len__(self) -> int:
        return len(self.columns)

    def __contains__(self, column: object) -> bool:
        return column in self.columns
