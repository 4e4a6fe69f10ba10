from dataclasses import dataclass
import os
import tempfile
from dotenv import load_dotenv

load_dotenv()


def _flag(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "y"}


@dataclass
class Settings:
    root: str = os.getenv("TMPKIT_ROOT") or os.path.realpath(tempfile.gettempdir())
    auto_clean: bool = _flag(os.getenv("TMPKIT_AUTO_CLEAN", "false"))
    log_level: str = os.getenv("TMPKIT_LOG_LEVEL", "WARNING").upper()


settings = Settings()
