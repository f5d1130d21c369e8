from pathlib import Path
from pydantic import BaseModel
import os

_DEFAULT_DATASET = Path(__file__).resolve().parent.parent / "data" / "gujarat-attractions.json"


class Settings(BaseModel):
    env: str = os.getenv("ENV", "dev")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    dataset_path: Path = Path(os.getenv("DATASET_PATH", str(_DEFAULT_DATASET)))
    currency: str = os.getenv("CURRENCY", "INR")


settings = Settings()
