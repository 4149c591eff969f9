"""HTTP template configuration."""

from pydantic import Field
from pydantic_settings import BaseSettings
from typing import Optional

DOWNLOAD_SUFFIX = ".dld"


class HttpTemplateSettings(BaseSettings):
    """HTTP template configuration settings."""

    # Timeouts are disabled unless configured
    connection_timeout: Optional[float] = Field(
        default=None,
        description="Connection timeout in seconds (None disables it)"
    )
    read_timeout: Optional[float] = Field(
        default=None,
        description="Read timeout in seconds (None disables it)"
    )
    follow_redirects: bool = Field(default=True, description="Follow redirects returned by the server")

    # Request/response encoding
    encoding: str = Field(default="UTF-8", description="Charset for query values and text bodies")
    default_content_type: str = Field(
        default="text/plain; charset=UTF-8",
        description="Content type used for POST bodies when none is given"
    )

    # Downloads
    chunk_size: int = Field(default=1024, gt=0, description="Chunk size in bytes when streaming downloads")
    download_dir: Optional[str] = Field(
        default=None,
        description="Directory for downloaded files (None means the current working directory)"
    )
    download_suffix: str = Field(default=DOWNLOAD_SUFFIX, description="File suffix for downloaded files")

    class Config:
        env_prefix = "HALO_HTTP_"
        env_file = ".env"
        case_sensitive = False


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="text", description="Log format (json or text)")
    log_config_file: str = Field(
        default="logging.yml",
        description="Path to logging configuration file"
    )

    class Config:
        env_prefix = "HALO_LOG_"
        env_file = ".env"
        case_sensitive = False


class Settings(BaseSettings):
    """Main settings that combines all configuration sections."""

    http: HttpTemplateSettings = Field(default_factory=HttpTemplateSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    class Config:
        env_prefix = "HALO_"
        env_file = ".env"
        case_sensitive = False
