"""
Configuration Management Module

Centralized configuration management following the 12-factor app methodology.
All configuration is loaded from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

# Load environment variables from config.env next to this module
load_dotenv(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'config.env'))


def _int_list(value: str):
    return [int(part) for part in value.split(',') if part.strip()]


class Config:
    """Base configuration class with all settings."""

    # Flask Settings
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'
    TESTING = False

    # Server Settings
    HOST = os.getenv('HOST', '127.0.0.1')
    PORT = int(os.getenv('PORT', 5000))
    TICK_INTERVAL_SECONDS = float(os.getenv('TICK_INTERVAL_SECONDS', 0.1))

    # Match Settings
    MAX_ATTEMPTS_PER_ROUND = int(os.getenv('MAX_ATTEMPTS_PER_ROUND', 5))
    ROUND_WORD_LENGTHS = _int_list(os.getenv('ROUND_WORD_LENGTHS', '4,5,5,5,6'))
    ROW_TIME_LIMIT_SECONDS = float(os.getenv('ROW_TIME_LIMIT_SECONDS', 30))
    STEAL_TIME_LIMIT_SECONDS = float(os.getenv('STEAL_TIME_LIMIT_SECONDS', 15))
    END_ROUND_DELAY_SECONDS = float(os.getenv('END_ROUND_DELAY_SECONDS', 1))
    STARTING_PLAYER = int(os.getenv('STARTING_PLAYER', 1))
    PLAYER1_NAME = os.getenv('PLAYER1_NAME', 'P1')
    PLAYER2_NAME = os.getenv('PLAYER2_NAME', 'P2')
    WORD_LIST_PATH = os.getenv('WORD_LIST_PATH')

    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR', 'logs')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    DEBUG = True
    END_ROUND_DELAY_SECONDS = 0.0


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
