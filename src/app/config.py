import os
from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Loads and validates all environment variables for the application.
    """
    # Core
    DATABASE_URL: str
    PUBLIC_BASE_URL: str = "http://localhost:8000"
    LOG_LEVEL: str = "INFO"

    # Together AI (OpenAI-compatible endpoint)
    TOGETHER_API_KEY: str
    TOGETHER_BASE_URL: str = "https://api.together.xyz/v1"

    # Helicone gateway (optional)
    HELICONE_API_KEY: str | None = None
    HELICONE_BASE_URL: str = "https://together.helicone.ai/v1"
    HELICONE_APP_NAME: str = "LlamaCoder"
    HELICONE_SESSION_NAME: str = "LlamaCoder Chat"

    # Helper models used while setting up a chat
    TITLE_MODEL: str = "meta-llama/Meta-Llama-3.1-8B-Instruct-Turbo"
    EXAMPLE_MODEL: str = "meta-llama/Meta-Llama-3.1-8B-Instruct-Turbo"
    VISION_MODEL: str = "meta-llama/Llama-3.2-90B-Vision-Instruct-Turbo"
    ARCHITECT_MODEL: str = "Qwen/Qwen2.5-Coder-32B-Instruct"

    # CORS Settings
    ALLOWED_ORIGINS: str = "" # Comma separated list of origins


# Models offered to clients for code generation
MODELS = [
    {"label": "Qwen 2.5 Coder 32B", "value": "Qwen/Qwen2.5-Coder-32B-Instruct"},
    {"label": "Llama 3.3 70B", "value": "meta-llama/Llama-3.3-70B-Instruct-Turbo"},
    {"label": "Llama 3.1 405B", "value": "meta-llama/Meta-Llama-3.1-405B-Instruct-Turbo"},
    {"label": "DeepSeek V3", "value": "deepseek-ai/DeepSeek-V3"},
]


@lru_cache()
def get_settings() -> Settings:
    """
    Returns a cached instance of the Settings object.
    Loads from .env file if present (for local dev).
    """
    if os.path.exists(".env"):
        return Settings(_env_file=".env", _env_file_encoding='utf-8')
    return Settings()
