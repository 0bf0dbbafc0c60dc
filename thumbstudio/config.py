"""
Configuration settings for the YouTube Thumbnail Studio application.
"""

import os
from pathlib import Path
from dotenv import load_dotenv


# Ensure environment variables are loaded
load_dotenv()


class Config:
    """Base configuration class."""

    # Application info
    APP_NAME = "YouTube Thumbnail Studio"
    APP_VERSION = "0.2.0"

    # Data directories
    BASE_DIR = Path(__file__).resolve().parent.parent.absolute()
    DATA_DIR = Path(os.getenv("DATA_DIR", BASE_DIR / "data"))
    DOWNLOADS_DIR = Path(os.getenv("DOWNLOADS_DIR", DATA_DIR / "downloads"))
    GENERATED_DIR = Path(os.getenv("GENERATED_DIR", DATA_DIR / "generated"))

    # Key-value store
    DATABASE_URL = os.getenv("DATABASE_URL", f"sqlite:///{DATA_DIR}/thumbstudio.db")

    # API keys
    GEMINI_API_KEY = os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY")

    # Default models
    ANALYSIS_MODEL = "gemini-3-pro-preview"
    IMAGE_MODEL = "gemini-3-pro-image-preview"
    IMAGE_EDIT_MODEL = "gemini-2.5-flash-image"
    VIDEO_MODEL = "veo-3.1-fast-generate-preview"
    TTS_MODEL = "gemini-2.5-flash-preview-tts"
    TRANSCRIPTION_MODEL = "gemini-3-flash-preview"
    CHAT_MODEL = "gemini-3-flash-preview"
    CHAT_THINKING_MODEL = "gemini-3-pro-preview"
    CHAT_MAPS_MODEL = "gemini-2.5-flash"
    THINKING_BUDGET = 32768
    TTS_VOICE = "Kore"
    TTS_SAMPLE_RATE = 24000

    # Thumbnail host
    THUMBNAIL_HOST = "https://img.youtube.com/vi"

    # Batch download pacing
    DOWNLOAD_DELAY_SECONDS = float(os.getenv("DOWNLOAD_DELAY_SECONDS", "0.4"))
    REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "15"))
    VIDEO_POLL_INTERVAL = float(os.getenv("VIDEO_POLL_INTERVAL", "8"))

    DEBUG = False
    LOG_LEVEL = "INFO"

    # Create data directories if they don't exist
    @classmethod
    def initialize(cls):
        """Initialize the application configuration."""
        cls.DOWNLOADS_DIR.mkdir(parents=True, exist_ok=True)
        cls.GENERATED_DIR.mkdir(parents=True, exist_ok=True)

        # Validate required environment variables
        if not cls.GEMINI_API_KEY:
            print("WARNING: GEMINI_API_KEY environment variable not set.")
            print("AI features are disabled until it is set in the .env file or environment.")


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
config.initialize()
