"""
Configuration management using Pydantic Settings
"""
from functools import lru_cache
from pathlib import Path
from typing import Optional, TYPE_CHECKING

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

if TYPE_CHECKING:
    from component_naming.naming.contracts import NamingPolicy

# config.py is at: backend/component_naming/core/config.py
_current_file = Path(__file__).resolve()
_backend_dir = _current_file.parent.parent.parent
_project_root = _backend_dir.parent
ENV_FILE = _project_root / ".env"
# Fallback: try in backend/ directory if not found in project root
if not ENV_FILE.exists():
    ENV_FILE = _backend_dir / ".env"
if ENV_FILE.exists():
    load_dotenv(ENV_FILE, override=True)


class Settings(BaseSettings):
    """Application settings"""

    # Application
    app_name: str = "component-naming"
    app_env: str = Field(default="development", description="Application environment")
    api_host: str = Field(default="0.0.0.0", description="API host")
    api_port: int = Field(default=8000, ge=1, le=65535, description="API port")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_module_levels: Optional[str] = Field(
        default=None,
        description='Module-specific log levels (JSON string, e.g., {"component_naming.naming": "DEBUG"})'
    )
    log_format: str = Field(
        default="json",
        description="Log format: 'json' for structured logging, 'text' for plain text"
    )
    log_file_enabled: bool = Field(default=False, description="Enable file logging")
    log_file_path: str = Field(
        default="logs/component-naming.log",
        description="Path to log file (relative to project root)"
    )
    log_file_rotation: str = Field(
        default="midnight",
        description="Log file rotation: 'midnight' or 'W0'..'W6' (weekly)"
    )
    log_file_retention: int = Field(
        default=30,
        ge=1,
        description="Number of days to keep log files"
    )

    # Component name randomization
    enable_component_name_randomization: bool = Field(
        default=True,
        description="Main switch: rename application components on their first pass"
    )
    component_name_randomization_adding_application_name: bool = Field(
        default=True,
        description="Generate new names by prefixing the application name"
    )
    component_name_randomization_adding_suffix: bool = Field(
        default=False,
        description="Generate new names by appending a random hex suffix (like pod names)"
    )
    component_name_max_attempts: int = Field(
        default=3,
        ge=1,
        le=20,
        description="Generation attempts per component when a generated name collides"
    )

    # Tracing
    enable_tracing: bool = Field(default=False, description="Enable OpenTelemetry tracing")
    tracing_service_name: str = Field(default="component-naming", description="Service name for tracing")
    tracing_exporter: str = Field(
        default="console",
        description="Tracing exporter: 'console' or 'otlp'"
    )
    tracing_otlp_endpoint: Optional[str] = Field(
        default=None,
        description="OTLP endpoint URL (e.g., http://localhost:4318/v1/traces)"
    )

    @field_validator("log_format", "tracing_exporter")
    @classmethod
    def lowercase_choice(cls, v: str) -> str:
        return v.strip().lower()

    @property
    def naming_policy(self) -> "NamingPolicy":
        """Naming policy built from the randomization switches"""
        from component_naming.naming.contracts import NamingPolicy

        return NamingPolicy.from_settings(self)

    model_config = SettingsConfigDict(
        env_file=str(ENV_FILE) if ENV_FILE.exists() else None,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_ignore_empty=True
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
