"""
Configuration for the HX-Trigger sample server.

Settings come from environment variables, falling back to defaults:
- ENV: deployment environment ('development', 'test', 'production')
- HXTRIGGER_HOST / HXTRIGGER_PORT: bind address for `python -m hxtrigger`
- LOG_LEVEL: logging level name
- HTMX_SCRIPT_URL: where the demo page loads htmx from

Invalid values are logged and the defaults kept.
"""

import os
import logging
from dataclasses import dataclass
from typing import List, Optional

logger = logging.getLogger(__name__)

ENV_DEFAULT = "development"
HOST_DEFAULT = "127.0.0.1"
PORT_DEFAULT = 8000
HTMX_SCRIPT_URL_DEFAULT = "https://unpkg.com/htmx.org@1.9.12"

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
VALID_LOG_LEVELS = {'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'}


@dataclass
class Settings:
    """Server settings.

    Attributes:
        env: Deployment environment; CORS for local dev origins is only
             enabled in 'development' and 'test'
        host: Interface uvicorn binds to
        port: TCP port uvicorn listens on
        log_level: Logging level ('DEBUG', 'INFO', 'WARNING', 'ERROR')
        htmx_script_url: URL of the htmx script included by the demo page
    """
    env: str = ENV_DEFAULT
    host: str = HOST_DEFAULT
    port: int = PORT_DEFAULT
    log_level: str = 'INFO'
    htmx_script_url: str = HTMX_SCRIPT_URL_DEFAULT

    def validate(self) -> List[str]:
        """Validate settings and return list of error messages (empty if valid)."""
        errors = []
        if not self.host or not isinstance(self.host, str):
            errors.append("Host must be a non-empty string")
        if not isinstance(self.port, int) or not (0 < self.port < 65536):
            errors.append("Port must be an integer between 1 and 65535")
        if self.log_level.upper() not in VALID_LOG_LEVELS:
            errors.append(f"Log level must be one of {VALID_LOG_LEVELS}")
        return errors

    @property
    def is_development(self) -> bool:
        return self.env in ("development", "test")

    @classmethod
    def from_environment(cls) -> "Settings":
        """Build settings from environment variables."""
        settings = cls()
        settings.env = os.environ.get('ENV', ENV_DEFAULT)

        host = os.environ.get('HXTRIGGER_HOST')
        if host:
            settings.host = host

        port = os.environ.get('HXTRIGGER_PORT')
        if port:
            try:
                settings.port = int(port)
            except (ValueError, TypeError):
                logger.warning(f"Invalid HXTRIGGER_PORT environment variable: {port}")

        log_level = os.environ.get('LOG_LEVEL')
        if log_level:
            if log_level.upper() in VALID_LOG_LEVELS:
                settings.log_level = log_level.upper()
            else:
                logger.warning(f"Invalid LOG_LEVEL environment variable: {log_level}")

        script_url = os.environ.get('HTMX_SCRIPT_URL')
        if script_url:
            settings.htmx_script_url = script_url

        errors = settings.validate()
        if errors:
            logger.warning(f"Configuration validation errors: {errors}")
            # Fall back to defaults for the invalid fields
            if not (0 < settings.port < 65536):
                settings.port = PORT_DEFAULT
        return settings


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging once for the process.

    Uses ``level`` when given, otherwise the LOG_LEVEL environment variable,
    otherwise INFO.
    """
    name = (level or os.environ.get('LOG_LEVEL') or 'INFO').upper()
    if name not in VALID_LOG_LEVELS:
        name = 'INFO'
    logging.basicConfig(level=getattr(logging, name), format=LOG_FORMAT)
