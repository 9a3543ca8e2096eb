import logging
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=True,
        extra='forbid',
    )

    APP_ENV: str = 'development'
    LOG_LEVEL: str = 'INFO'
    CORS_ORIGINS: str = 'http://localhost:3000'

    ROOT_DOMAIN: str = 'near-me.us'
    EXTRA_ROOT_DOMAINS: str = ''
    EXTRA_BLOCKED_HOSTS: str = ''
    TRUST_PROXY_HEADERS: bool = False
    BLOCKED_REDIRECT_URL: str = 'https://services.near-me.us'

    ADMIN_API_TOKEN: str | None = None
    REGISTRY_SEED_PATH: str | None = None

    @field_validator('ROOT_DOMAIN')
    @classmethod
    def normalize_root_domain(cls, value: str) -> str:
        value = value.strip().strip('.').lower()
        if '.' not in value:
            raise ValueError('ROOT_DOMAIN must be a registered domain such as near-me.us')
        return value

    @field_validator('LOG_LEVEL')
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f'Unknown LOG_LEVEL {value!r}')
        return level

    @field_validator('ADMIN_API_TOKEN')
    @classmethod
    def validate_admin_token(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        if len(value) < 16:
            raise ValueError('ADMIN_API_TOKEN must be at least 16 characters')
        return value

    @property
    def cors_origins(self) -> list[str]:
        return [item.strip() for item in self.CORS_ORIGINS.split(',') if item.strip()]

    @property
    def extra_root_domains(self) -> list[str]:
        return [item.strip().strip('.').lower() for item in self.EXTRA_ROOT_DOMAINS.split(',') if item.strip()]

    @property
    def extra_blocked_hosts(self) -> list[str]:
        return [item.strip().lower() for item in self.EXTRA_BLOCKED_HOSTS.split(',') if item.strip()]

    @property
    def admin_host(self) -> str:
        return f'admin.{self.ROOT_DOMAIN}'


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
