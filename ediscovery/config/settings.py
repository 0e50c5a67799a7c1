from datetime import datetime
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Run parameters loaded from environment variables or a .env file."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"
    project_name: str = "default"

    # Newline-delimited terms or phrases, ORed together. Empty disables culling.
    culling: str = ""
    culling_stemming: bool = True

    extraction_engine: str = "auto"
    pdf_engine: str = "pdfplumber"

    input_dir: Path = Path("input")
    output_dir: Path = Path("output")
    history_file: Path = Path("logs/history.log")

    worker_count: int = Field(default=1, ge=1)
    files_per_unit: int = Field(default=50, ge=1)
    max_unit_attempts: int = Field(default=3, ge=1)


def save_parameters(settings: Settings, directory: Path) -> Path:
    """Write a timestamped JSON snapshot of the run parameters into directory."""
    directory.mkdir(parents=True, exist_ok=True)
    stamp = datetime.now().strftime("%y%m%d_%H%M%S")
    path = directory / f"parameters.{stamp}.json"
    path.write_text(settings.model_dump_json(indent=2), encoding="utf-8")
    return path
