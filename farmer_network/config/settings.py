"""Application configuration settings"""

import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    TESTING = os.getenv("TESTING", "false").lower() in {"1", "true", "yes", "on"}
    DEBUG = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes", "on"}

    # Server
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "4000"))
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*").split(",")

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_PATH = os.getenv("LOG_PATH", "")
    LOG_FORMAT = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s - %(name)s - %(levelname)s - [%(correlation_id)s] %(message)s",
    )

    # Postgresql Database settings (read by Prisma from the environment)
    DATABASE_URL: str = os.getenv("DATABASE_URL", "")

    # Auth
    SERVICE_AUTH_SECRET = os.getenv("SERVICE_AUTH_SECRET", "")
    SERVICE_AUTH_ISSUER = os.getenv("SERVICE_AUTH_ISSUER", "farmer-network")
    SERVICE_AUTH_AUDIENCE = os.getenv("SERVICE_AUTH_AUDIENCE", "farmer-network-web")
    ACCESS_TOKEN_TTL_MINUTES = int(os.getenv("ACCESS_TOKEN_TTL_MINUTES", "1440"))

    # File upload
    UPLOAD_BASE = os.getenv("UPLOAD_BASE", "uploads")
    UPLOAD_URL_PREFIX = "/uploads"
    MAX_UPLOAD_MB = float(os.getenv("MAX_UPLOAD_MB", "5"))
    MAX_POST_IMAGES = int(os.getenv("MAX_POST_IMAGES", "4"))
    ALLOWED_IMAGE_EXTENSIONS = os.getenv(
        "ALLOWED_IMAGE_EXTENSIONS", "jpg,jpeg,png,gif,webp"
    ).split(",")

    # Weather
    OPENWEATHER_KEY = os.getenv("OPENWEATHER_KEY", "")
    OPENWEATHER_URL = os.getenv(
        "OPENWEATHER_URL", "https://api.openweathermap.org/data/2.5/onecall"
    )
    WEATHER_TIMEOUT_SECONDS = float(os.getenv("WEATHER_TIMEOUT_SECONDS", "10"))


class DevelopmentConfig(Config):
    """Development configuration"""

    DEBUG = True


class TestingConfig(Config):
    """Testing configuration"""

    TESTING = True


class ProductionConfig(Config):
    """Production configuration"""

    pass


# Configuration dictionary
config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": DevelopmentConfig,
}


def get_config(env=None):
    """Get configuration based on environment"""
    if env is None:
        env = os.getenv("APP_ENV", "development")
    return config.get(env, config["default"])
