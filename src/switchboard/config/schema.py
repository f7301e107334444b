"""Pydantic models for switchboard.yaml configuration."""

from typing import Literal

from pydantic import BaseModel, Field


class KeyedConfig(BaseModel):
    """Keyed registry configuration."""

    duplicate_policy: Literal["overwrite", "reject"] = Field(
        default="overwrite",
        description="Registering an existing key: 'overwrite' replaces it, 'reject' raises",
    )


class BroadcastConfig(BaseModel):
    """Broadcast registry configuration."""

    failure_policy: Literal["isolate", "fail_fast"] = Field(
        default="isolate",
        description=(
            "Listener error handling: 'isolate' records the failure and keeps delivering, "
            "'fail_fast' stops and raises"
        ),
    )


class LoggingConfig(BaseModel):
    """Logging configuration for the CLI."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Root log level",
    )


class SwitchboardConfig(BaseModel):
    """Root configuration schema for switchboard."""

    keyed: KeyedConfig = Field(default_factory=KeyedConfig)
    broadcast: BroadcastConfig = Field(default_factory=BroadcastConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
