"""Tests for ennu.core.locales – YAML-based phrase bundles."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from ennu.core.locales import Locale, LocaleRepository, Strings

_EN = {
    "round": "Round",
    "score": "Score",
    "correct": "Correct!",
    "tryAgain": "Try again!",
    "gameOver": "Game Over! You got {score} points.",
    "restart": "Play Again",
    "exitConfirm": "Are you sure you want to exit?",
    "exit": "Exit",
}


def _write_yaml(path: Path, data) -> None:
    path.write_text(yaml.dump(data, allow_unicode=True, default_flow_style=False), encoding="utf-8")


@pytest.fixture()
def locales_dir(tmp_path: Path) -> Path:
    d = tmp_path / "locales"
    d.mkdir()
    _write_yaml(d / "en-US.yaml", _EN)
    _write_yaml(d / "zh-TW.yaml", dict(_EN, correct="答對了！"))
    return d


# ---------------------------------------------------------------------------
# Locale enum
# ---------------------------------------------------------------------------

class TestLocale:
    def test_values(self):
        assert Locale.ZH_TW.value == "zh-TW"
        assert Locale.EN_US.value == "en-US"

    def test_other_flips(self):
        assert Locale.ZH_TW.other() is Locale.EN_US
        assert Locale.EN_US.other() is Locale.ZH_TW

    def test_other_twice_is_identity(self):
        for locale in Locale:
            assert locale.other().other() is locale


# ---------------------------------------------------------------------------
# Bundled data files
# ---------------------------------------------------------------------------

class TestShippedBundles:
    def test_loads_both_locales(self):
        repo = LocaleRepository()
        assert repo.get(Locale.EN_US).correct == "Correct!"
        assert repo.get(Locale.ZH_TW).correct == "答對了！"

    def test_game_over_interpolation(self):
        repo = LocaleRepository()
        assert repo.get(Locale.EN_US).game_over_message(7) == "Game Over! You got 7 points."
        assert repo.get(Locale.ZH_TW).game_over_message(10) == "遊戲結束！你得到了 10 分！"

    def test_try_again_and_exit_confirm(self):
        en = LocaleRepository().get(Locale.EN_US)
        assert en.try_again == "Try again!"
        assert en.exit_confirm == "Are you sure you want to exit?"


# ---------------------------------------------------------------------------
# Loading from a custom directory
# ---------------------------------------------------------------------------

class TestLocaleRepository:
    def test_custom_dir(self, locales_dir: Path):
        repo = LocaleRepository(locales_dir)
        assert repo.get(Locale.ZH_TW).correct == "答對了！"
        assert isinstance(repo.get(Locale.EN_US), Strings)

    def test_values_are_stripped(self, locales_dir: Path):
        _write_yaml(locales_dir / "en-US.yaml", dict(_EN, exit="  Exit  "))
        assert LocaleRepository(locales_dir).get(Locale.EN_US).exit == "Exit"

    def test_missing_directory(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            LocaleRepository(tmp_path / "nope")

    def test_missing_locale_file(self, locales_dir: Path):
        (locales_dir / "zh-TW.yaml").unlink()
        with pytest.raises(FileNotFoundError):
            LocaleRepository(locales_dir)

    def test_not_a_mapping(self, locales_dir: Path):
        _write_yaml(locales_dir / "en-US.yaml", ["a", "b"])
        with pytest.raises(ValueError, match="mapping"):
            LocaleRepository(locales_dir)

    def test_missing_key(self, locales_dir: Path):
        data = dict(_EN)
        del data["tryAgain"]
        _write_yaml(locales_dir / "en-US.yaml", data)
        with pytest.raises(ValueError, match="tryAgain"):
            LocaleRepository(locales_dir)

    def test_non_string_value(self, locales_dir: Path):
        _write_yaml(locales_dir / "en-US.yaml", dict(_EN, score=5))
        with pytest.raises(ValueError, match="score"):
            LocaleRepository(locales_dir)

    def test_game_over_without_placeholder(self, locales_dir: Path):
        _write_yaml(locales_dir / "en-US.yaml", dict(_EN, gameOver="Game over!"))
        with pytest.raises(ValueError, match="placeholder"):
            LocaleRepository(locales_dir)
