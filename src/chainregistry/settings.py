import hashlib
import os
from pathlib import Path
from typing import Any, Literal

import pydantic
import pydantic_settings
from hyapp.pydsettings import (
    YAMLedDotEnvSettingsSource,
    YAMLedEnvSettingsSource,
    YAMLedSecretsSettingsSource,
)

from .chains import DEFAULT_CHAIN_ID
from .chains_model import ChainsConfig

TEnvName = Literal["dev", "tests", "devrun", "staging", "prod"]
CONFIG_ROOT = Path.home() / ".config/chainregistry"
ENV_FILE_PATH = CONFIG_ROOT / "env"
SECRETS_DIR_PATH_ENV = os.environ.get("CHR_SECRETS_DIR")
SECRETS_DIR_PATH = CONFIG_ROOT / "secrets" if not SECRETS_DIR_PATH_ENV else Path(SECRETS_DIR_PATH_ENV)


class SettingsOptsBase(pydantic_settings.BaseSettings):
    """Overridable key-value settings, base version that only reads init arguments"""

    model_config = pydantic_settings.SettingsConfigDict(
        env_prefix="CHR_",
        env_file=ENV_FILE_PATH,
        secrets_dir=SECRETS_DIR_PATH,
        frozen=True,
    )

    def __repr__(self) -> str:
        hash_str = hashlib.sha256(self.model_dump_json().encode()).hexdigest()[:16]
        return f"{self.__class__.__name__}(env={self.env}, hash={hash_str}, ...)"

    def __str__(self) -> str:
        return self.__repr__()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[pydantic_settings.BaseSettings],
        init_settings: pydantic_settings.PydanticBaseSettingsSource,
        env_settings: pydantic_settings.PydanticBaseSettingsSource,
        dotenv_settings: pydantic_settings.PydanticBaseSettingsSource,
        file_secret_settings: pydantic_settings.PydanticBaseSettingsSource,
    ) -> tuple[pydantic_settings.PydanticBaseSettingsSource, ...]:
        return (init_settings,)

    env: TEnvName = "dev"  # `CHR_ENV`

    sentry_dsn: str = ""

    # Catalog override, primarily for the tests and non-default deployments.
    chains_config: ChainsConfig | None = None  # `CHR_CHAINS_CONFIG`
    default_chain_id: int = DEFAULT_CHAIN_ID  # `CHR_DEFAULT_CHAIN_ID`

    @pydantic.field_validator("chains_config", mode="before")
    @classmethod
    def _load_chains_config(cls, value: Any) -> ChainsConfig | None:
        if value is None:
            return None
        return ChainsConfig.load(value)


class SettingsOptsEnv(SettingsOptsBase):
    """Overridable settings class that also loads values from `os.environ`"""

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[pydantic_settings.BaseSettings],
        init_settings: pydantic_settings.PydanticBaseSettingsSource,
        env_settings: pydantic_settings.PydanticBaseSettingsSource,
        dotenv_settings: pydantic_settings.PydanticBaseSettingsSource,
        file_secret_settings: pydantic_settings.PydanticBaseSettingsSource,
    ) -> tuple[pydantic_settings.PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            YAMLedDotEnvSettingsSource(settings_cls),
            YAMLedEnvSettingsSource(settings_cls),
            YAMLedSecretsSettingsSource(settings_cls),
        )


class Settings(pydantic.BaseModel):
    opts: SettingsOptsBase = pydantic.Field(default_factory=SettingsOptsEnv)
