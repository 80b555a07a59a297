"""Tests for engine configuration and its YAML I/O."""

import tempfile
from pathlib import Path

import pytest

from lib2048.board import Board
from lib2048.config import EngineConfig, load_config, save_config


DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[2] / "configs" / "default.yaml"


class TestEngineConfig:
    """Tests for EngineConfig dataclass."""

    def test_defaults(self):
        config = EngineConfig()
        assert config.size == 4
        assert config.win_value == 11
        assert config.initial_populate_count == 2
        assert config.four_probability == 0.2
        assert config.seed is None

    @pytest.mark.parametrize("kwargs,message", [
        ({"size": 1}, "size"),
        ({"win_value": 0}, "win_value"),
        ({"initial_populate_count": -1}, "initial_populate_count"),
        ({"initial_populate_count": 17}, "exceeds"),
        ({"four_probability": 1.5}, "four_probability"),
    ])
    def test_invalid_values_raise(self, kwargs, message):
        with pytest.raises(ValueError) as exc_info:
            EngineConfig(**kwargs)
        assert message in str(exc_info.value)

    def test_board_uses_config(self):
        board = Board.new_empty(EngineConfig(size=5, win_value=7))
        assert board.x_count == 5
        assert board.win_value == 7


class TestConfigIO:
    """Tests for load_config / save_config."""

    def test_save_and_load_round_trip(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            config_path = Path(tmpdir) / "nested" / "engine.yaml"
            config = EngineConfig(size=5, win_value=9, seed=3)

            save_config(config, str(config_path))
            loaded = load_config(str(config_path))

            assert loaded == config

    def test_missing_keys_take_defaults(self, tmp_path):
        config_path = tmp_path / "engine.yaml"
        config_path.write_text("engine:\n  win_value: 8\n")

        config = load_config(str(config_path))

        assert config.win_value == 8
        assert config.size == 4

    def test_flat_mapping_accepted(self, tmp_path):
        config_path = tmp_path / "engine.yaml"
        config_path.write_text("size: 3\ninitial_populate_count: 1\n")

        config = load_config(str(config_path))

        assert config.size == 3
        assert config.initial_populate_count == 1

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "missing.yaml"))

    def test_empty_file_raises(self, tmp_path):
        config_path = tmp_path / "empty.yaml"
        config_path.write_text("")
        with pytest.raises(ValueError) as exc_info:
            load_config(str(config_path))
        assert "empty" in str(exc_info.value)

    def test_unknown_key_raises(self, tmp_path):
        config_path = tmp_path / "engine.yaml"
        config_path.write_text("engine:\n  colour: red\n")
        with pytest.raises(ValueError) as exc_info:
            load_config(str(config_path))
        assert "colour" in str(exc_info.value)

    def test_invalid_value_in_file_raises(self, tmp_path):
        config_path = tmp_path / "engine.yaml"
        config_path.write_text("engine:\n  four_probability: 2\n")
        with pytest.raises(ValueError):
            load_config(str(config_path))

    def test_shipped_default_config(self):
        assert load_config(str(DEFAULT_CONFIG_PATH)) == EngineConfig()
