from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

_BUNDLED_TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templating" / "templates"


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    anonymization_categories: str = "EMAIL,PHONE,PERSON,COMPANY,CITY"

    templates_dir: Path = _BUNDLED_TEMPLATES_DIR
    default_template_id: str = "default"

    enrichment_provider: str = "groq"
    enrichment_temperature: float = 0.4
    enrichment_max_tokens: int = 4000

    enrichment_groq_api_key: str = ""
    enrichment_groq_model_name: str = "llama-3.3-70b-versatile"
    enrichment_groq_timeout_seconds: int = 30

    enrichment_openai_api_key: str = ""
    enrichment_openai_model_name: str = ""
    enrichment_openai_timeout_seconds: int = 30

    enrichment_openai_compatible_base_url: str = ""
    enrichment_openai_compatible_api_key: str = ""
    enrichment_openai_compatible_model_name: str = ""
    enrichment_openai_compatible_timeout_seconds: int = 30

    enrichment_openrouter_api_key: str = ""
    enrichment_openrouter_model_name: str = ""
    enrichment_openrouter_timeout_seconds: int = 30

    enrichment_ollama_api_key: str = "ollama"
    enrichment_ollama_model_name: str = ""
    enrichment_ollama_timeout_seconds: int = 60
