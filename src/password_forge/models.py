from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from enum import Enum
from typing import Any


class GenerationError(Enum):
    NO_CHARACTER_CLASS_SELECTED = "Select at least one character class."
    INVALID_LENGTH = "Password length must be at least 1."

    @property
    def message(self) -> str:
        return self.value


@dataclass(frozen=True)
class GenerationOptions:
    length: int = 16
    include_uppercase: bool = True
    include_lowercase: bool = True
    include_numbers: bool = True
    include_symbols: bool = True
    exclude_similar: bool = False
    exclude_ambiguous: bool = False

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "GenerationOptions":
        known = {item.name for item in fields(cls)}
        return cls(**{key: value for key, value in payload.items() if key in known})


@dataclass(frozen=True)
class StrengthResult:
    score: float
    label: str
    color_tag: str
    points: int

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
