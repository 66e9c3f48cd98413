"""Tests for configuration schemas."""

from __future__ import annotations

from pathlib import Path

import pytest

from othello.board import Color
from othello.config import AppConfig, GameConfig, load_config

DEFAULT_CONFIG = Path(__file__).resolve().parent.parent / "configs" / "default.yaml"


def test_app_config_parsing():
    data = {
        "game": {"human_color": "White", "show_board": False},
        "agent": {"id": "greedy", "params": {"corner_bonus": 5}},
        "log": {"enabled": True, "log_dir": "logs/games"},
    }

    cfg = AppConfig.from_dict(data)
    assert cfg.game.human_color == "white"
    assert cfg.game.human is Color.WHITE
    assert cfg.game.show_board is False
    assert cfg.agent.id == "greedy"
    assert cfg.agent.params == {"corner_bonus": 5}
    assert cfg.log.enabled is True
    assert cfg.log.log_dir == "logs/games"


def test_app_config_defaults():
    cfg = AppConfig.from_dict({})
    assert cfg.game.human is None
    assert cfg.game.show_board is True
    assert cfg.agent.id == "greedy"
    assert cfg.agent.params == {}
    assert cfg.log.enabled is False


def test_invalid_human_color():
    with pytest.raises(ValueError):
        GameConfig(human_color="red")


def test_load_config_from_yaml(tmp_path):
    path = tmp_path / "cfg.yaml"
    path.write_text("game:\n  human_color: black\nagent:\n  id: greedy\n  params:\n    pause: true\n")

    cfg = load_config(path)
    assert cfg.game.human is Color.BLACK
    assert cfg.agent.params == {"pause": True}


def test_load_config_rejects_non_mapping(tmp_path):
    path = tmp_path / "cfg.yaml"
    path.write_text("- just\n- a list\n")
    with pytest.raises(ValueError):
        load_config(path)


def test_default_config_file():
    cfg = load_config(DEFAULT_CONFIG)
    assert cfg.game.human is None
    assert cfg.agent.id == "greedy"
    assert cfg.agent.params["corner_bonus"] == 10
    assert cfg.log.enabled is False


def test_non_string_human_color_is_rejected():
    with pytest.raises(ValueError):
        AppConfig.from_dict({"game": {"human_color": True}})


@pytest.mark.parametrize(
    "data",
    [
        {"game": ["human_color", "white"]},
        {"agent": "greedy"},
        {"agent": {"id": "greedy", "params": [1, 2]}},
        {"log": True},
    ],
)
def test_non_mapping_sections_are_rejected(data):
    with pytest.raises(ValueError):
        AppConfig.from_dict(data)
