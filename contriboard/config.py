import os
from dotenv import load_dotenv

load_dotenv()


def _database_uri():
    url = os.getenv("DATABASE_URL")
    if not url:
        return None
    rootcert = os.getenv("DB_SSLROOTCERT")
    if rootcert:
        sep = "&" if "?" in url else "?"
        url = f"{url}{sep}sslmode=verify-full&sslrootcert={rootcert}"
    return url


class Config:
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_DATABASE_URI = _database_uri()
    JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY")

    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "http://localhost:3000")

    # guards the admin endpoints (backfill, ingestion)
    MIGRATION_SECRET = os.getenv("MIGRATION_SECRET")

    LEADERBOARD_MAX_DAYS = int(os.getenv("LEADERBOARD_MAX_DAYS", 366))
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


class DevelopmentConfig(Config):
    DEBUG = True


class ProductionConfig(Config):
    DEBUG = False


class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    JWT_SECRET_KEY = "test-jwt-secret-key-with-enough-bytes"
    MIGRATION_SECRET = "test-migration-secret"
    CORS_ORIGINS = "http://localhost:3000"


CONFIGS = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
}
