"""
Configuration Management Module

Centralized configuration management following the 12-factor app methodology.
All configuration is loaded from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

# Load environment variables from config.env next to this module
load_dotenv(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'config.env'))


class Config:
    """Base configuration class with all settings."""

    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'

    # Game Settings
    TARGET_WORD = os.getenv('TARGET_WORD', 'WWCSD').strip().upper()

    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()
    LOG_DIR = os.getenv('LOG_DIR', 'logs')

    @classmethod
    def effective_log_level(cls) -> str:
        """DEBUG profiles log everything, including full game snapshots."""
        return 'DEBUG' if cls.DEBUG else cls.LOG_LEVEL


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    DEBUG = True


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
