"""Application configuration"""
from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings"""

    # Supabase
    supabase_url: str
    supabase_service_role_key: str
    supabase_anon_key: str

    # External APIs
    resend_api_key: str
    resend_api_url: str = "https://api.resend.com/emails"
    email_from: str = "VA Marketplace <notifications@verifiedva.app>"

    # Application
    environment: str = "development"
    log_level: str = "INFO"
    cors_origins: list[str] = [
        "https://verifiedva.vercel.app",
        "http://localhost:5173",
        "http://localhost:3000",
    ]

    # Frontend URLs (for email links)
    frontend_url: str = "https://verifiedva.vercel.app"

    # Per-user email sending limit (in-memory, resets on restart)
    email_rate_limit: int = 10
    email_rate_window_seconds: int = 60

    class Config:
        env_file = ".env"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
