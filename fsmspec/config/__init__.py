"""Configuration module for fsmspec."""

from fsmspec.config.settings import BusConfig, EngineConfig, LoggingConfig, load_config

__all__ = ["BusConfig", "EngineConfig", "LoggingConfig", "load_config"]
