"""Application settings"""
from pydantic_settings import BaseSettings
from typing import Optional, List


class Settings(BaseSettings):
    """Application settings"""

    # Application
    APP_NAME: str = "SDH Inventory API"
    APP_VERSION: str = "1.0.0"
    LOG_LEVEL: str = "INFO"

    # API
    API_V1_PREFIX: str = "/api/v1"
    CORS_ORIGINS: List[str] = ["http://localhost:5173", "http://localhost:3000", "http://127.0.0.1:5173"]

    # Database
    DATABASE_URL: Optional[str] = None
    DATABASE_TYPE: str = "postgresql"  # sqlite, postgresql
    DB_HOST: str = "localhost"
    DB_PORT: int = 5432
    DB_NAME: str = "sdh_inventory"
    DB_USER: str = "postgres"
    DB_PASSWORD: str = "postgres"

    # Security
    SECRET_KEY: str = "your-secret-key-change-in-production"

    # JWT
    JWT_SECRET_KEY: Optional[str] = None
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRE_HOURS: int = 24  # Token expiration time in hours

    # Default Admin User
    DEFAULT_ADMIN_USERNAME: str = "admin"
    DEFAULT_ADMIN_PASSWORD: str = "admin123"  # Change this in production!

    # File Upload
    UPLOAD_DIR: str = "uploads"
    MAX_UPLOAD_SIZE: int = 10 * 1024 * 1024  # 10MB
    ALLOWED_IMAGE_EXTENSIONS: List[str] = [".jpg", ".jpeg", ".png", ".gif", ".webp"]
    IMAGE_MAX_DIMENSION: int = 1024  # Longest side of stored photos, in pixels
    IMAGE_JPEG_QUALITY: int = 70

    # Inventory
    MAINTENANCE_WARNING_DAYS: int = 30
    STRICT_VOCABULARY: bool = False
    SEED_DEFAULT_SETTINGS: bool = True
    TIMEZONE: str = "Europe/Prague"

    class Config:
        env_file = ".env"
        case_sensitive = True

    def get_database_url(self) -> str:
        """Get database URL from settings or environment"""
        if self.DATABASE_URL:
            return self.DATABASE_URL

        if self.DATABASE_TYPE == "postgresql":
            return f"postgresql://{self.DB_USER}:{self.DB_PASSWORD}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        elif self.DATABASE_TYPE == "sqlite":
            return "sqlite:///./sdh_inventory.db"
        else:
            raise ValueError(f"Unsupported database type: {self.DATABASE_TYPE}")


settings = Settings()
