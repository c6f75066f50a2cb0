"""
settings.py

This module provides configuration management for the clinput package.

Features:
- Centralized configuration using Pydantic settings
- Environment overrides with the CLINPUT_ prefix

Usage:
Import appsettings for configuration values.
"""

from typing import Final, Literal
from pydantic_settings import BaseSettings, SettingsConfigDict

SinkName = Literal["console", "log", "silent"]


class App(BaseSettings):
    """
    Package settings model.

    Settings can be overridden through environment variables with the
    CLINPUT_ prefix.

    Attributes:
        beQuiet: Suppress detailed logging output
        noComplain: Suppress diagnostics for unrecognized tokens
        diagnosticSink: Where diagnostics go by default
    """

    beQuiet: bool = False
    noComplain: bool = False
    diagnosticSink: SinkName = "console"

    model_config = SettingsConfigDict(
        env_prefix="CLINPUT_",
        case_sensitive=False,
        extra="ignore",
    )


appsettings: Final[App] = App()
