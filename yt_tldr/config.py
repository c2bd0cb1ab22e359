"""
Configuration settings for the YouTube TL;DR summarizer.
"""

import os
from dotenv import load_dotenv


# Ensure environment variables are loaded
load_dotenv()


class Config:
    """Base configuration class."""

    # Application info
    APP_NAME = "YouTube TL;DR"
    APP_VERSION = "0.2.0"

    # Local model runtime
    OLLAMA_BASE_URL = os.getenv("OLLAMA_BASE_URL", "http://localhost:11434")

    # Known models
    VALID_GEMINI_MODELS = (
        "gemini-2.0-flash",
        "gemini-2.0-flash-lite",
        "gemini-2.0-flash-exp",
        "gemini-2.5-flash",
        "gemini-2.5-pro",
    )
    VALID_MISTRAL_MODELS = (
        "mistral-large-latest",
        "mistral-medium-latest",
        "mistral-small-latest",
        "open-mistral-nemo",
        "ministral-8b-latest",
    )
    OLLAMA_ALIASES = ("llama3", "llama3.2")

    # Default models
    DEFAULT_GEMINI_MODEL = "gemini-2.0-flash"
    DEFAULT_OLLAMA_MODEL = "llama3.2:latest"
    DEFAULT_API_MODEL = "gemini"
    DEFAULT_CLI_MODEL = "llama3.2:latest"
    TEMPERATURE = 0.7

    # Summaries
    SUMMARY_LENGTHS = ("short", "long")
    DEFAULT_SUMMARY_LENGTH = "short"

    # HTTP layer
    API_HOST = os.getenv("API_HOST", "0.0.0.0")
    API_PORT = int(os.getenv("API_PORT", "8000"))
    CORS_ORIGINS = ["*"]
    CORS_METHODS = ["GET", "POST", "OPTIONS"]
    CORS_HEADERS = ["Content-Type", "Authorization", "Accept"]

    @classmethod
    def initialize(cls):
        """Initialize the application configuration."""
        # Validate required environment variables
        if not os.getenv("GEMINI_API_KEY"):
            print("WARNING: GEMINI_API_KEY environment variable not set.")
            print("Gemini models will be unavailable until it is set in the .env file or environment.")


class DevelopmentConfig(Config):
    """Development configuration."""

    DEBUG = True
    LOG_LEVEL = "DEBUG"


class ProductionConfig(Config):
    """Production configuration."""

    DEBUG = False
    LOG_LEVEL = "INFO"


# Determine which configuration to use based on environment
def get_config():
    """Get the appropriate configuration based on environment."""
    env = os.getenv("ENVIRONMENT", "development").lower()
    if env == "production":
        return ProductionConfig
    else:
        return DevelopmentConfig


# Create a config instance
config = get_config()
