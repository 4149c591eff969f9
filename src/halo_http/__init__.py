"""halo-http - one-shot HTTP GET, POST and download helpers."""

__version__ = "0.1.0"

from .core.clients.http import HttpClientTemplate
from .core.config import HttpTemplateSettings, LoggingSettings, Settings
from .core.exceptions import (
    HttpErrorKind,
    HttpUtilsError,
    UrlEncodeError,
    TransportError,
    UnexpectedStatusError,
    NoContentError,
    DownloadFileError,
    ClientCloseError,
)
from .core.handlers import build_query_string
from .core.json_adapters import JsonAdapter, JsonModuleAdapter, PydanticJsonAdapter
from .core.template import HttpTemplate, JSON_CONTENT_TYPE
from .utils.logging import setup_logging

__all__ = [
    # Templates
    "HttpTemplate",
    "HttpClientTemplate",
    "JSON_CONTENT_TYPE",
    "build_query_string",
    # Settings
    "HttpTemplateSettings",
    "LoggingSettings",
    "Settings",
    # Errors
    "HttpErrorKind",
    "HttpUtilsError",
    "UrlEncodeError",
    "TransportError",
    "UnexpectedStatusError",
    "NoContentError",
    "DownloadFileError",
    "ClientCloseError",
    # JSON adapters
    "JsonAdapter",
    "JsonModuleAdapter",
    "PydanticJsonAdapter",
    # Logging
    "setup_logging",
]
