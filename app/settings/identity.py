"""Identity record that tags every BFHL response.

Values come from ``USER_*`` environment variables, then from the JSON file
written by ``scripts/setup_identity.py``, then from the defaults below.
"""

import os
import re
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, EmailStr, StringConstraints, field_validator
from pydantic_settings import (
    BaseSettings,
    JsonConfigSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

DEFAULT_CONFIG_FILE = Path("user-config.json")

NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


def config_file_path() -> Path:
    return Path(os.environ.get("USER_CONFIG_FILE", DEFAULT_CONFIG_FILE))


class IdentitySettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="USER_")

    full_name: str = "john_doe"
    birth_date: str = "17091999"
    email: str = "john@xyz.com"
    roll_number: str = "ABCD123"

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            JsonConfigSettingsSource(settings_cls, json_file=config_file_path()),
        )

    @property
    def user_id(self) -> str:
        return f"{self.full_name}_{self.birth_date}"


class IdentityRecord(BaseModel):
    full_name: NonEmptyStr
    birth_date: NonEmptyStr
    email: EmailStr
    roll_number: NonEmptyStr

    @field_validator("full_name")
    @classmethod
    def normalize_full_name(cls, value: str) -> str:
        return re.sub(r"\s+", "_", value.lower())

    @field_validator("birth_date")
    @classmethod
    def check_birth_date(cls, value: str) -> str:
        if not re.fullmatch(r"[0-9]{8}", value):
            raise ValueError("Birth date must be in DDMMYYYY format (8 digits)")
        return value

    @property
    def user_id(self) -> str:
        return f"{self.full_name}_{self.birth_date}"


def save_identity(record: IdentityRecord, path: Path | None = None) -> Path:
    target = path or config_file_path()
    target.write_text(record.model_dump_json(indent=2), encoding="utf-8")
    return target
