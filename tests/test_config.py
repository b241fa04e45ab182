"""Tests for the difficulty table and configuration helpers."""

import pytest

from models import Color
from models.wire import Difficulty
from games.WireGame import config
from games.WireGame.config import get_difficulty_setting, resolve_difficulty
from games.WireGame.errors import InvalidDifficultyError


class TestDifficultyTable:
    """The corridor width / speed table is fixed."""

    @pytest.mark.parametrize("tag,width,speed", [
        ("easy", 100, 2),
        ("medium", 60, 3),
        ("hard", 40, 4),
        ("super-hard", 30, 6),
    ])
    def test_settings(self, tag, width, speed):
        setting = get_difficulty_setting(tag)
        assert setting.corridor_width == width
        assert setting.speed == speed

    def test_every_difficulty_has_a_setting(self):
        assert set(config.DIFFICULTY_SETTINGS) == set(Difficulty)

    def test_harder_is_narrower_and_faster(self):
        settings = [config.DIFFICULTY_SETTINGS[d] for d in Difficulty]
        widths = [s.corridor_width for s in settings]
        speeds = [s.speed for s in settings]
        assert widths == sorted(widths, reverse=True)
        assert speeds == sorted(speeds)


class TestResolveDifficulty:
    """Exact tag matching with no fallback."""

    def test_enum_passes_through(self):
        assert resolve_difficulty(Difficulty.HARD) is Difficulty.HARD

    def test_string_tag(self):
        assert resolve_difficulty("super-hard") is Difficulty.SUPER_HARD

    @pytest.mark.parametrize("value", ["Easy", "extreme", "", "super_hard", None, 3])
    def test_unknown_values_raise(self, value):
        with pytest.raises(InvalidDifficultyError) as exc_info:
            resolve_difficulty(value)
        assert exc_info.value.value == value

    def test_error_is_a_value_error(self):
        with pytest.raises(ValueError, match="Invalid difficulty"):
            resolve_difficulty("nightmare")


class TestEnvHelpers:
    """Environment overrides used for screen size, FPS and policy."""

    def test_get_int_default(self, monkeypatch):
        monkeypatch.delenv('IRAIRA_TEST_INT', raising=False)
        assert config._get_int('IRAIRA_TEST_INT', 42) == 42

    def test_get_int_from_env(self, monkeypatch):
        monkeypatch.setenv('IRAIRA_TEST_INT', '1024')
        assert config._get_int('IRAIRA_TEST_INT', 42) == 1024

    def test_get_float_from_env(self, monkeypatch):
        monkeypatch.setenv('IRAIRA_TEST_FLOAT', '12.5')
        assert config._get_float('IRAIRA_TEST_FLOAT', 1.0) == 12.5

    def test_get_str_from_env(self, monkeypatch):
        monkeypatch.setenv('IRAIRA_TEST_STR', 'rectangle')
        assert config._get_str('IRAIRA_TEST_STR', 'corridor') == 'rectangle'

    def test_goal_size_is_independent_of_difficulty(self):
        assert config.GOAL_SIZE == 30


class TestColors:
    """Palette entries are validated Color models."""

    def test_single_colors(self):
        for name in ('BACKGROUND_COLOR', 'CORRIDOR_COLOR', 'WALL_COLOR',
                     'GOAL_COLOR', 'CHARACTER_COLOR', 'HUD_COLOR'):
            assert isinstance(getattr(config, name), Color)

    def test_effect_palettes(self):
        assert config.EXPLOSION_COLORS
        assert config.CONFETTI_COLORS
        assert all(len(c.as_rgb_tuple) == 3 for c in config.EXPLOSION_COLORS + config.CONFETTI_COLORS)
