# Copyright 2025 The Langsniff Authors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Configuration management for Langsniff.

Handles classifier thresholds, registry and dictionary locations using
Pydantic Settings. Supports environment variables and .env files.
"""

from __future__ import annotations

import json
import os
from typing import Annotated, Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from langsniff.core.models import DEFAULT_SCALE_CONSTANT, ClassifierConfig
from langsniff.profiles.dictionaries import DEFAULT_DICTIONARY_PATHS


class Settings(BaseSettings):
    """Application settings.

    All settings can be overridden via environment variables with the
    LANGSNIFF_ prefix.

    Example .env file:
        LANGSNIFF_MIN_MATCHES=3
        LANGSNIFF_REQUIRED_CONFIDENCE_MARGIN=1.5
        LANGSNIFF_REGISTRY_PATH=~/.config/langsniff/languages.yaml
        LANGSNIFF_DICTIONARY_PATHS=/usr/share/hunspell:~/.local/share/hunspell
        LANGSNIFF_LOG_LEVEL=DEBUG
    """

    # Classifier thresholds
    min_matches: int = Field(
        default=2,
        description="Minimum stopword matches before a variant counts as evidence",
        ge=0,
        json_schema_extra={"env": "LANGSNIFF_MIN_MATCHES"},
    )

    required_confidence_margin: float = Field(
        default=2.0,
        description="Ratio the winner's confidence must exceed over the runner-up",
        gt=0.0,
        allow_inf_nan=False,
        json_schema_extra={"env": "LANGSNIFF_REQUIRED_CONFIDENCE_MARGIN"},
    )

    confidence_scale_constant: float = Field(
        default=DEFAULT_SCALE_CONSTANT,
        description="Scaling constant K of the confidence formula",
        gt=0.0,
        allow_inf_nan=False,
        json_schema_extra={"env": "LANGSNIFF_CONFIDENCE_SCALE_CONSTANT"},
    )

    # Profiles and dictionaries
    registry_path: str | None = Field(
        default=None,
        description="YAML registry file; the built-in registry is used when unset",
        json_schema_extra={"env": "LANGSNIFF_REGISTRY_PATH"},
    )

    dictionary_paths: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: list(DEFAULT_DICTIONARY_PATHS),
        description="Directories searched for hunspell .dic/.aff files",
        json_schema_extra={"env": "LANGSNIFF_DICTIONARY_PATHS"},
    )

    # Logging
    log_level: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        json_schema_extra={"env": "LANGSNIFF_LOG_LEVEL"},
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="LANGSNIFF_",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("dictionary_paths", mode="before")
    @classmethod
    def split_dictionary_paths(cls, value: Any) -> Any:
        """Accept a JSON list or an os.pathsep separated string of directories."""
        if not isinstance(value, str):
            return value
        if value.lstrip().startswith("["):
            return json.loads(value)
        return [path for path in value.split(os.pathsep) if path.strip()]

    def to_classifier_config(self, **overrides: float | int | None) -> ClassifierConfig:
        """Build a ClassifierConfig, applying non-None overrides.

        Example:
            >>> Settings().to_classifier_config(min_matches=3).min_matches
            3
        """
        values = {
            "min_matches": self.min_matches,
            "required_confidence_margin": self.required_confidence_margin,
            "confidence_scale_constant": self.confidence_scale_constant,
        }
        values.update({key: value for key, value in overrides.items() if value is not None})
        return ClassifierConfig(**values)


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
