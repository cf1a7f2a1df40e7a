# app/shared/config.py
from pathlib import Path
from pydantic import BaseModel
import os

class Settings(BaseModel):
    ENV: str = os.getenv("ENV", "dev")
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "1916"))

    # store files live in the working directory unless told otherwise
    DATA_DIR: Path = Path(os.getenv("DATA_DIR", "."))
    COMPACT_FILE: str = os.getenv("COMPACT_FILE", "data.txt")
    READABLE_FILE: str = os.getenv("READABLE_FILE", "data_readable.txt")

    # front-end assets, mounted at "/" when the directory exists
    WEB_DIR: Path = Path(os.getenv("WEB_DIR", "./web"))

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

settings = Settings()
