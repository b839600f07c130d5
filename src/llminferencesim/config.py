"""Simulator configuration loading and validation."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .core.latency import LatencyProfile
from .text.corpus import DEFAULT_RESPONSES

logger = logging.getLogger(__name__)


class ConfigurationError(Exception):
    """Raised when configuration loading or validation fails."""
    pass


class LatencyConfig(BaseModel):
    """Simulated response timing, in milliseconds."""

    time_to_first_token_ms: float = Field(default=0.0, ge=0)
    time_to_first_token_std_ms: float = Field(default=0.0, ge=0)
    inter_token_latency_ms: float = Field(default=0.0, ge=0)
    inter_token_latency_std_ms: float = Field(default=0.0, ge=0)

    def to_profile(self) -> LatencyProfile:
        return LatencyProfile(**self.model_dump())


class SimulatorConfig(BaseModel):
    """Configuration for a completion simulator instance."""

    seed: int = 42
    max_model_len: int = Field(default=1024, ge=1)
    responses: Optional[List[str]] = None
    latency: LatencyConfig = Field(default_factory=LatencyConfig)

    @field_validator("responses")
    @classmethod
    def _check_responses(cls, value: Optional[List[str]]) -> Optional[List[str]]:
        if value is not None and not value:
            raise ValueError("responses must contain at least one entry when given")
        return value

    def corpus_responses(self) -> List[str]:
        """Return the configured responses, or the built-in set."""
        return list(self.responses) if self.responses is not None else list(DEFAULT_RESPONSES)

    @classmethod
    def from_dict(cls, config_data: Optional[Dict[str, Any]]) -> "SimulatorConfig":
        """Build and validate a configuration from a plain dictionary.

        Args:
            config_data: Configuration mapping; None yields the defaults

        Returns:
            SimulatorConfig instance

        Raises:
            ConfigurationError: If the data does not describe a valid config
        """
        if config_data is None:
            config_data = {}
        if not isinstance(config_data, dict):
            raise ConfigurationError(
                f"Configuration must be a mapping, got {type(config_data).__name__}"
            )
        try:
            return cls.model_validate(config_data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid simulator configuration: {e}") from e

    @classmethod
    def from_yaml_file(cls, config_path: str) -> "SimulatorConfig":
        """Load a configuration from a YAML file."""
        try:
            with open(config_path, "r") as f:
                config_data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to read {config_path}: {e}") from e
        return cls.from_dict(config_data)

    @classmethod
    def from_json_file(cls, config_path: str) -> "SimulatorConfig":
        """Load a configuration from a JSON file."""
        try:
            with open(config_path, "r") as f:
                config_data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Failed to read {config_path}: {e}") from e
        return cls.from_dict(config_data)

    @classmethod
    def from_file(cls, config_path: str) -> "SimulatorConfig":
        """Load a configuration, choosing the format from the file suffix."""
        if Path(config_path).suffix in [".yaml", ".yml"]:
            config = cls.from_yaml_file(config_path)
        else:
            config = cls.from_json_file(config_path)

        logger.info(f"Loaded simulator configuration from {config_path}")
        return config
