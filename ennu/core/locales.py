from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml

DEFAULT_DATA_DIR = Path(__file__).resolve().parent.parent / "data" / "locales"


class Locale(str, enum.Enum):
    ZH_TW = "zh-TW"
    EN_US = "en-US"

    def other(self) -> "Locale":
        return Locale.EN_US if self is Locale.ZH_TW else Locale.ZH_TW


@dataclass(frozen=True)
class Strings:
    """Named UI and speech phrases for one locale."""

    round: str
    score: str
    correct: str
    try_again: str
    game_over: str
    restart: str
    exit_confirm: str
    exit: str

    def game_over_message(self, score: int) -> str:
        return self.game_over.replace("{score}", str(score))


# YAML key -> Strings field
_FIELDS = {
    "round": "round",
    "score": "score",
    "correct": "correct",
    "tryAgain": "try_again",
    "gameOver": "game_over",
    "restart": "restart",
    "exitConfirm": "exit_confirm",
    "exit": "exit",
}


class LocaleRepository:
    def __init__(self, base_dir: Optional[Path] = None) -> None:
        self._base_dir = base_dir if base_dir is not None else DEFAULT_DATA_DIR
        self._bundles = self._load_bundles()

    def get(self, locale: Locale) -> Strings:
        return self._bundles[locale]

    def _load_bundles(self) -> dict[Locale, Strings]:
        if not self._base_dir.exists():
            raise FileNotFoundError(f"Locales directory not found: {self._base_dir}")

        bundles: dict[Locale, Strings] = {}
        for locale in Locale:
            path = self._base_dir / f"{locale.value}.yaml"
            if not path.exists():
                raise FileNotFoundError(f"Missing locale file: {path}")
            raw = yaml.safe_load(path.read_text(encoding="utf-8"))
            if not raw or not isinstance(raw, dict):
                raise ValueError(f"{path.name}: expected a mapping of named strings")
            values = {}
            for key, field in _FIELDS.items():
                value = raw.get(key)
                if not value or not isinstance(value, str):
                    raise ValueError(f"{path.name}: missing or invalid '{key}'")
                values[field] = value.strip()
            if "{score}" not in values["game_over"]:
                raise ValueError(f"{path.name}: 'gameOver' needs a {{score}} placeholder")
            bundles[locale] = Strings(**values)
        return bundles
