import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_MODEL = "Llama-4-Maverick-17B-128E-Instruct-FP8"
DEFAULT_URBAN_DICTIONARY_URL = "https://api.urbandictionary.com/v0"
DEFAULT_DATASET = Path(__file__).parent / "data" / "slang.json"


@dataclass(frozen=True)
class Settings:
    llama_api_key: Optional[str] = None
    llama_model: str = DEFAULT_MODEL
    urban_dictionary_url: str = DEFAULT_URBAN_DICTIONARY_URL
    dataset_path: Path = DEFAULT_DATASET
    log_level: str = "WARNING"


def load_settings(env_file: Optional[str] = None) -> Settings:
    """Read settings from the environment, after loading a .env file if present."""
    load_dotenv(env_file)

    api_key = os.environ.get("LLAMA_API_KEY", "").strip()
    return Settings(
        llama_api_key=api_key or None,
        llama_model=os.environ.get("LLAMA_MODEL", DEFAULT_MODEL),
        urban_dictionary_url=os.environ.get("URBAN_DICTIONARY_URL", DEFAULT_URBAN_DICTIONARY_URL).rstrip('/'),
        dataset_path=Path(os.environ.get("SLANGBRIDGE_DATASET", str(DEFAULT_DATASET))),
        log_level=os.environ.get("SLANGBRIDGE_LOG_LEVEL", "WARNING").upper(),
    )
