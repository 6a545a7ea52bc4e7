"""Configuration management using environment variables.

This module provides centralized configuration management using python-decouple
to read from .env files and environment variables.
"""

from decouple import config
from typing import List


class Config:
    """Base configuration class."""

    # Database
    DATABASE_URL: str = config('DATABASE_URL', default='sqlite:///champions.db')

    # Server
    HOST: str = config('HOST', default='127.0.0.1')
    PORT: int = config('PORT', default=3000, cast=int)

    # Environment
    DEBUG: bool = config('DEBUG', default=False, cast=bool)
    ENVIRONMENT: str = config('ENVIRONMENT', default='development')

    # Security
    CORS_ORIGINS: List[str] = config(
        'CORS_ORIGINS',
        default='http://localhost:3000,http://localhost:3001',
        cast=lambda x: [origin.strip() for origin in x.split(',') if origin.strip()]
    )

    # Logging
    LOG_LEVEL: str = config('LOG_LEVEL', default='INFO')

    # Load bundled clubs/players into empty tables at startup
    SEED_DATA: bool = config('SEED_DATA', default=True, cast=bool)



class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False
    LOG_LEVEL = 'WARNING'


class TestingConfig(Config):
    """Testing configuration."""
    DATABASE_URL = 'sqlite:///test.db'
    DEBUG = True
    SEED_DATA = False


def get_config() -> Config:
    """Get configuration based on environment."""
    env = config('ENVIRONMENT', default='development')

    if env == 'production':
        return ProductionConfig()
    elif env == 'testing':
        return TestingConfig()
    else:
        return DevelopmentConfig()


# Global config instance
settings = get_config()
