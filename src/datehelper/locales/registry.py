from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Dict, List, Tuple

PhraseFunc = Callable[[int], str]

@dataclass(frozen=True)
class RelativePhrases:
    just_now: str
    minute: PhraseFunc
    hour: PhraseFunc
    day: PhraseFunc

@dataclass(frozen=True)
class LocalizationTable:
    """
    Calendar names for one language.
    Index 0 is Sunday for weekdays and January for months, matching
    the engine's own decomposition.
    """
    language: str
    weekdays: Tuple[str, ...]
    weekdays_abbr: Tuple[str, ...]
    months: Tuple[str, ...]
    months_abbr: Tuple[str, ...]
    relative: RelativePhrases

    def __post_init__(self) -> None:
        for field, size in (("weekdays", 7), ("weekdays_abbr", 7), ("months", 12), ("months_abbr", 12)):
            if len(getattr(self, field)) != size:
                raise ValueError(f"{self.language}: {field} must have exactly {size} entries")

_REGISTRY: Dict[str, LocalizationTable] = {}

def register_locale(table: LocalizationTable, *, overwrite: bool = False) -> None:
    if (not overwrite) and (table.language in _REGISTRY):
        raise KeyError(f"Locale '{table.language}' already exists. Use overwrite=True to replace.")
    _REGISTRY[table.language] = table

def get_locale(language: str) -> LocalizationTable:
    if language not in _REGISTRY:
        raise KeyError(f"Unknown locale '{language}'. Available: {sorted(_REGISTRY)}")
    return _REGISTRY[language]

def list_locales() -> List[str]:
    return sorted(_REGISTRY)
