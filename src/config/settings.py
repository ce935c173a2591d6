"""
Configuration management for Meeting Summarizer application.
Provides environment-based settings for paths, AI providers and email delivery.
"""
import os
import secrets
from typing import Optional

from dotenv import load_dotenv

# Load environment variables from .env before any settings are read
load_dotenv()


def get_base_path() -> str:
    """
    Get base path from environment. Defaults to serving at the root so the
    API lives under /api.
    """
    return os.environ.get('BASE_PATH', '').rstrip('/')


def get_max_upload_size() -> int:
    """Get maximum transcript upload size in bytes."""
    return int(os.environ.get('MAX_UPLOAD_SIZE', 10 * 1024 * 1024))  # 10MB default


def get_secret_key() -> str:
    """Get Flask secret key from environment or generate one."""
    return os.environ.get('SECRET_KEY', secrets.token_hex(32))


def get_log_dir() -> str:
    """Get directory for application log files."""
    return os.environ.get('LOG_DIR', 'logs')


def get_env_flag(name: str, default: bool = False) -> bool:
    """Read a boolean flag from the environment."""
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


def get_gemini_api_key() -> Optional[str]:
    """Get the free-tier (Google Gemini) credential, if configured."""
    return os.environ.get('GEMINI_API_KEY') or None


def get_openai_api_key() -> Optional[str]:
    """Get the paid-tier (OpenAI) credential, if configured."""
    return os.environ.get('OPENAI_API_KEY') or None


class Config:
    """Base configuration class."""

    # Flask settings
    SECRET_KEY = get_secret_key()
    TESTING = False

    # Path settings
    BASE_PATH = get_base_path()
    LOG_DIR = get_log_dir()

    # Upload settings. The request ceiling leaves room for multipart overhead;
    # the transcript limit itself is enforced by the upload service.
    MAX_UPLOAD_SIZE = get_max_upload_size()
    MAX_CONTENT_LENGTH = MAX_UPLOAD_SIZE * 2

    # AI provider settings
    GEMINI_API_KEY = get_gemini_api_key()
    GEMINI_MODEL = os.environ.get('GEMINI_MODEL', 'gemini-1.5-flash')
    OPENAI_API_KEY = get_openai_api_key()
    OPENAI_MODEL = os.environ.get('OPENAI_MODEL', 'gpt-4o')
    LLM_REQUEST_TIMEOUT = int(os.environ.get('LLM_REQUEST_TIMEOUT', 120))

    # Email settings
    SMTP_HOST = os.environ.get('SMTP_HOST', '')
    SMTP_PORT = int(os.environ.get('SMTP_PORT', 587))
    SMTP_USERNAME = os.environ.get('SMTP_USERNAME', '')
    SMTP_PASSWORD = os.environ.get('SMTP_PASSWORD', '')
    SMTP_USE_SSL = get_env_flag('SMTP_USE_SSL')
    EMAIL_FROM = os.environ.get('EMAIL_FROM', '')
    EMAIL_FROM_NAME = os.environ.get('EMAIL_FROM_NAME', 'AI Meeting Notes')
    EMAIL_OUTBOX_DIR = os.environ.get('EMAIL_OUTBOX_DIR', os.path.join('data', 'outbox'))


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False
    SESSION_COOKIE_SECURE = True


class TestingConfig(Config):
    """Testing configuration. Never talks to real providers or SMTP."""
    TESTING = True
    DEBUG = False
    SECRET_KEY = 'testing'
    GEMINI_API_KEY = None
    OPENAI_API_KEY = None
    SMTP_HOST = ''


def get_config(config_name: Optional[str] = None) -> Config:
    """
    Get configuration class based on environment.

    Args:
        config_name: Configuration name ('development', 'production', 'testing',
            or None for auto-detect)

    Returns:
        Configuration class instance
    """
    if config_name is None:
        config_name = os.environ.get('FLASK_ENV', 'development')

    config_map = {
        'development': DevelopmentConfig,
        'production': ProductionConfig,
        'testing': TestingConfig,
    }

    return config_map.get(config_name, DevelopmentConfig)()


def setup_flask_config(app, config_name: Optional[str] = None, base_path: Optional[str] = None):
    """
    Setup Flask application configuration.

    Args:
        app: Flask application instance
        config_name: Optional configuration name passed to get_config
        base_path: Base path for the application (optional)
    """
    config = get_config(config_name)

    # Override base path if provided
    if base_path is not None:
        config.BASE_PATH = base_path.rstrip('/')

    # Apply configuration to Flask app
    app.config.from_object(config)

    # Set additional runtime configuration
    app.config.update({
        'BASE_PATH': config.BASE_PATH,
    })

    return config
