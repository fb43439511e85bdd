"""
Tests for boss stats loading and settings.
"""

import pytest

from ..config import Settings
from ..loader import InputParseError, load_boss, parse_boss


class TestParseBoss:
    """Tests for parse_boss()."""

    def test_parse_valid(self):
        boss = parse_boss("Hit Points: 58\nDamage: 9\n")
        assert boss.hit_points == 58
        assert boss.damage == 9

    def test_blank_lines_and_whitespace(self):
        boss = parse_boss("\n  Hit Points:   13  \n\nDamage:8\n\n")
        assert (boss.hit_points, boss.damage) == (13, 8)

    def test_key_is_case_insensitive(self):
        boss = parse_boss("hit points: 13\nDAMAGE: 8")
        assert boss.hit_points == 13

    def test_missing_line(self):
        with pytest.raises(InputParseError) as exc_info:
            parse_boss("Hit Points: 13\n")
        assert "expected 2 lines" in str(exc_info.value)

    def test_missing_colon(self):
        with pytest.raises(InputParseError) as exc_info:
            parse_boss("Hit Points 13\nDamage: 8")
        assert exc_info.value.line_number == 1

    def test_wrong_key(self):
        with pytest.raises(InputParseError) as exc_info:
            parse_boss("Hit Points: 13\nArmor: 2")
        assert exc_info.value.line_number == 2
        assert "Damage" in str(exc_info.value)

    def test_keys_out_of_order(self):
        with pytest.raises(InputParseError):
            parse_boss("Damage: 8\nHit Points: 13")

    def test_not_an_integer(self):
        with pytest.raises(InputParseError) as exc_info:
            parse_boss("Hit Points: lots\nDamage: 8")
        assert "not an integer" in str(exc_info.value)

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            parse_boss("")


class TestLoadBoss:
    """Tests for load_boss()."""

    def test_load_from_file(self, boss_input_file):
        boss = load_boss(boss_input_file("Hit Points: 71\nDamage: 10\n"))
        assert (boss.hit_points, boss.damage) == (71, 10)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_boss(tmp_path / "nope")


class TestSettings:
    """Tests for environment-driven settings."""

    def test_defaults(self, monkeypatch):
        for name in ("SPELLDUEL_PLAYER_HP", "SPELLDUEL_PLAYER_MANA", "SPELLDUEL_MAX_DEPTH",
                     "SPELLDUEL_MAX_NODES", "SPELLDUEL_WORKERS", "SPELLDUEL_LOG_LEVEL", "ALLOWED_ORIGINS"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings.from_env()
        assert settings.player_hit_points == 50
        assert settings.player_mana == 500
        assert settings.max_depth == 64
        assert settings.max_nodes == 2_000_000
        assert settings.workers == 1
        assert settings.log_level == "WARNING"
        assert settings.allowed_origins == ["*"]

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("SPELLDUEL_PLAYER_HP", "10")
        monkeypatch.setenv("SPELLDUEL_PLAYER_MANA", "250")
        monkeypatch.setenv("SPELLDUEL_WORKERS", "0")
        monkeypatch.setenv("SPELLDUEL_LOG_LEVEL", "debug")
        monkeypatch.setenv("SPELLDUEL_MAX_NODES", "1000")
        settings = Settings.from_env()
        assert settings.player_hit_points == 10
        assert settings.player_mana == 250
        assert settings.workers == 1
        assert settings.log_level == "DEBUG"
        assert settings.max_nodes == 1000

    def test_bad_integer(self, monkeypatch):
        monkeypatch.setenv("SPELLDUEL_MAX_DEPTH", "deep")
        with pytest.raises(ValueError) as exc_info:
            Settings.from_env()
        assert "SPELLDUEL_MAX_DEPTH" in str(exc_info.value)
