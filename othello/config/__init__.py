"""Config package exports."""

from .schema import AgentConfig, AppConfig, GameConfig, LogConfig, load_config

__all__ = ["AgentConfig", "AppConfig", "GameConfig", "LogConfig", "load_config"]
