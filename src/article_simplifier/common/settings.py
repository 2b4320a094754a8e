from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator

from ..models import ProficiencyLevel


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="allow")

    # --- core -----------------------------------------------------------
    project_name: str = "Article-Simplifier"

    # Level used by the CLI when --level is not given
    default_level: ProficiencyLevel = Field(
        ProficiencyLevel.BEGINNER, validation_alias="DEFAULT_LEVEL"
    )

    # Optional JSON lexicon layered over the builtin vocabulary tables
    vocabulary_path: Optional[Path] = Field(None, validation_alias="VOCABULARY_PATH")

    @field_validator("default_level", mode="before")
    @classmethod
    def _parse_level(cls, v):
        if isinstance(v, ProficiencyLevel):
            return v
        return ProficiencyLevel.parse(v)

    @field_validator("vocabulary_path", mode="before")
    @classmethod
    def _empty_path(cls, v):
        if v in (None, ""):
            return None
        return v


# singleton
SettingsInstance = Settings()
# pep-8 alias
settings = SettingsInstance
