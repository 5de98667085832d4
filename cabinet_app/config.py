from enum import Enum
from pathlib import Path
import uuid

from pydantic import Field
from pydantic_settings import BaseSettings


ROOT = Path(__file__).resolve().parent.parent


class Env(Enum):
    local = "local"
    dev = "dev"
    prod = "prod"


class Config(BaseSettings):
    env: Env = Env.local
    html_dir: Path = ROOT / "assets/html"
    assets_dir: Path = ROOT / "assets"
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8000
    title: str = "Cabinet"
    # Signs the session cookie. Random per process unless set.
    secret_key: str = Field(default_factory=lambda: uuid.uuid4().hex)
    session_cookie: str = "cabinet"
