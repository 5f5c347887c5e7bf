"""
Configuration management using Pydantic Settings.

Architecture Decision: Why pydantic-settings?
- Type-safe configuration with validation
- Reads the variable names deployments already export (MYSQL_*, MSSQL_*,
  APP_ENV) from the process environment or a .env file
- Easy to test with different configurations
"""

from pathlib import Path
from typing import Optional, Literal, Tuple, Type

from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)
from sqlalchemy.engine import URL, make_url


DEFAULT_CONFIG_FILE = Path("config/settings.yaml")


class Settings(BaseSettings):
    """
    Application settings with multiple sources:
    1. Default values (hardcoded)
    2. YAML config file (config/settings.yaml, optional)
    3. .env file
    4. Environment variables (highest priority)
    """
    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        yaml_file=DEFAULT_CONFIG_FILE,
        yaml_file_encoding='utf-8',
        extra='ignore'
    )

    app_env: str = "production"
    log_level: str = "INFO"

    # HTTP listener
    host: str = "0.0.0.0"
    port: int = 8080

    # Database selection
    db_backend: Literal["sqlite", "mysql", "mssql"] = "sqlite"
    database_url: Optional[str] = None
    sql_echo: bool = False

    sqlite_path: str = "todo.db"

    mysql_user: str = "root"
    mysql_password: str = ""
    mysql_host: str = "localhost"
    mysql_port: int = 3306
    mysql_db: str = "todoapp"

    mssql_server: str = "localhost"
    mssql_port: int = 1433
    mssql_db: str = "TodoApp"
    mssql_user: str = "sa"
    mssql_password: str = ""
    mssql_driver: str = "ODBC Driver 18 for SQL Server"
    mssql_trust_server_certificate: bool = True

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        # YAML sits below the environment so secrets never have to live in it
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )

    @property
    def is_development(self) -> bool:
        return self.app_env.strip().lower() == "development"

    def _build_url(self) -> URL:
        if self.db_backend == "sqlite":
            return URL.create("sqlite+aiosqlite", database=self.sqlite_path)

        if self.db_backend == "mysql":
            return URL.create(
                "mysql+aiomysql",
                username=self.mysql_user,
                password=self.mysql_password,
                host=self.mysql_host,
                port=self.mysql_port,
                database=self.mysql_db,
                query={"charset": "utf8mb4"},
            )

        # db_backend == "mssql"; the Literal type rules out anything else
        query = {"driver": self.mssql_driver}
        if self.mssql_trust_server_certificate:
            query["TrustServerCertificate"] = "yes"
        return URL.create(
            "mssql+aioodbc",
            username=self.mssql_user,
            password=self.mssql_password,
            host=self.mssql_server,
            port=self.mssql_port,
            database=self.mssql_db,
            query=query,
        )

    def get_db_url(self) -> str:
        """Get the async SQLAlchemy URL, DATABASE_URL winning over the backend fields"""
        if self.database_url:
            return self.database_url
        return self._build_url().render_as_string(hide_password=False)

    def describe_target(self) -> str:
        """Database URL with the password masked, for log lines"""
        if self.database_url:
            return make_url(self.database_url).render_as_string(hide_password=True)
        return self._build_url().render_as_string(hide_password=True)


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance"""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reload_settings():
    """Reload settings from environment and files"""
    global _settings
    _settings = Settings()
    return _settings
