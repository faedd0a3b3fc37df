"""Configuration management"""

from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    """Application settings"""
    
    # API Settings
    api_title: str = "Traffic Manager Intercept Helpers"
    api_version: str = "1.0.0"
    api_prefix: str = "/v1"
    
    # Kubernetes Settings
    kubectl_path: str = "kubectl"
    kubectl_context: Optional[str] = None
    kubectl_timeout_seconds: int = 10
    
    # Development
    debug: bool = False
    log_level: str = "INFO"
    
    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
