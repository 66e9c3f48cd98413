"""Configuration schema for console games."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from ..board import Color


def _section(data: Dict[str, Any], key: str) -> Dict[str, Any]:
    value = data.get(key) or {}
    if not isinstance(value, dict):
        raise ValueError(f"Config section '{key}' must be a mapping, got {type(value)}")
    return value


@dataclass
class GameConfig:
    human_color: Optional[str] = None  # "white" | "black" | None (ask)
    show_board: bool = True

    def __post_init__(self) -> None:
        if self.human_color is not None:
            if not isinstance(self.human_color, str):
                raise ValueError(f"game.human_color must be a string, got {self.human_color!r}")
            # validates the name
            Color.from_name(self.human_color)
            self.human_color = self.human_color.strip().lower()

    @property
    def human(self) -> Optional[Color]:
        return None if self.human_color is None else Color.from_name(self.human_color)


@dataclass
class AgentConfig:
    id: str = "greedy"
    params: Dict[str, Any] = field(default_factory=dict)


@dataclass
class LogConfig:
    enabled: bool = False
    log_dir: str = "data/logs"


@dataclass
class AppConfig:
    game: GameConfig = field(default_factory=GameConfig)
    agent: AgentConfig = field(default_factory=AgentConfig)
    log: LogConfig = field(default_factory=LogConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        game_data = _section(data, "game")
        game = GameConfig(
            human_color=game_data.get("human_color"),
            show_board=bool(game_data.get("show_board", True)),
        )

        agent_data = _section(data, "agent")
        agent = AgentConfig(
            id=str(agent_data.get("id", "greedy")),
            params=dict(_section(agent_data, "params")),
        )

        log_data = _section(data, "log")
        log = LogConfig(
            enabled=bool(log_data.get("enabled", False)),
            log_dir=str(log_data.get("log_dir", "data/logs")),
        )

        return cls(game=game, agent=agent, log=log)


def load_config(path: Union[str, Path]) -> AppConfig:
    """Load AppConfig from a YAML file."""
    path = Path(path)
    with path.open() as f:
        data = yaml.safe_load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Config must be a YAML mapping, got {type(data)}")
    return AppConfig.from_dict(data)
