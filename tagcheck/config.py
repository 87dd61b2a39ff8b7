from collections.abc import Mapping
from types import MappingProxyType
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from tagcheck.schemas import InstructionPhrases
from tagcheck.services.tags import DEFAULT_EXCEPTIONS, DEFAULT_TAGS_TO_CHECK


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", env_prefix="TAGCHECK_")

    log_level: str = "INFO"
    # Console output instead of JSON lines, for local runs
    log_json: bool = True


settings = Settings()


class IncorrectTagCheckConfig(BaseModel):
    """Options a host may pass to IncorrectTagCheck.

    Keys use the host's camelCase names; unknown keys are ignored and missing
    ones fall back to the built-in tables. Without fallbackInstructions the
    check uses its own phrases.
    """

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    tags_to_check: frozenset[str] = Field(default=DEFAULT_TAGS_TO_CHECK, alias="tagsToCheck")
    exceptions: Mapping[str, frozenset[str]] = Field(default_factory=lambda: DEFAULT_EXCEPTIONS)
    fallback_instructions: Optional[InstructionPhrases] = Field(default=None, alias="fallbackInstructions")

    @field_validator("exceptions", mode="after")
    @classmethod
    def read_only_exceptions(cls, value):
        return MappingProxyType(dict(value))

    @field_validator("fallback_instructions", mode="before")
    @classmethod
    def exactly_two_phrases(cls, value):
        """Require [singular, plural]; a tuple of another length is a config error."""
        if isinstance(value, (list, tuple)) and len(value) != 2:
            raise ValueError("fallbackInstructions must be [singular phrase, plural phrase]")
        return value
