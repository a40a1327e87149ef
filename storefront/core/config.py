"""
Configuración centralizada de la aplicación
"""
from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL, make_url
from typing import List, Optional


class Settings(BaseSettings):
    """Configuración de la aplicación"""

    # API Settings
    API_TITLE: str = "Storefront API"
    API_VERSION: str = "0.1.0"
    API_DESCRIPTION: str = "Catalogo de productos y pedidos"

    # Database
    # DATABASE_URL wins over the DB_* parts when both are present
    DATABASE_URL: Optional[str] = None
    DB_HOST: str = "localhost"
    DB_PORT: int = 5432
    DB_USER: str = "postgres"
    DB_PASSWORD: str = ""
    DB_NAME: str = "storefront"
    DB_SSLMODE: Optional[str] = None
    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 20

    # Logging
    LOG_LEVEL: str = "INFO"

    # CORS - Can be string (comma-separated) or JSON array
    # Example: "http://localhost:3000,https://yourdomain.com" or '["http://localhost:3000"]'
    ALLOWED_ORIGINS: Optional[str] = "http://localhost:3000"

    def get_allowed_origins(self) -> List[str]:
        """Parse ALLOWED_ORIGINS string into list"""
        if not self.ALLOWED_ORIGINS:
            return ["http://localhost:3000"]

        # Try JSON parse first (for array format)
        import json
        try:
            origins = json.loads(self.ALLOWED_ORIGINS)
            if isinstance(origins, list):
                return origins
        except (json.JSONDecodeError, ValueError):
            pass

        # Fall back to comma-separated string
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",")]

    @property
    def database_url(self) -> URL:
        """
        SQLAlchemy URL for the configured database

        Uses DATABASE_URL as-is when provided, otherwise assembles a
        postgresql+psycopg2 URL from the DB_* settings.
        """
        if self.DATABASE_URL:
            return make_url(self.DATABASE_URL)

        query = {}
        if self.DB_SSLMODE == "require":
            query["sslmode"] = "require"

        return URL.create(
            "postgresql+psycopg2",
            username=self.DB_USER,
            password=self.DB_PASSWORD or None,
            host=self.DB_HOST,
            port=self.DB_PORT,
            database=self.DB_NAME,
            query=query,
        )

    @property
    def safe_database_url(self) -> str:
        """Database URL with the password masked, for logs"""
        return self.database_url.render_as_string(hide_password=True)

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


settings = Settings()
