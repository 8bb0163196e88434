"""
Configuration for the Pump Master QA suite.

Values come from environment variables, optionally seeded from a `.env`
file in the working directory. Real environment variables take precedence
over the file.
"""

import logging
import os
import sys
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, field_validator


DEFAULT_API_BASE_URL = "http://localhost:3000/api"
DEFAULT_BASE_URL = "http://localhost:3000"


class Settings(BaseModel):
    api_base_url: str = DEFAULT_API_BASE_URL
    base_url: str = DEFAULT_BASE_URL

    # Web login user
    test_username: str = "testuser@pumpmaster.com"
    test_password: str = "Test@123"
    # API scenario user
    api_username: str = "test@pumpmaster.com"
    api_password: str = "Test@123"
    engineer_username: str = "engineer@pumpmaster.com"
    engineer_password: str = "Engineer@123"
    admin_username: str = "admin@pumpmaster.com"
    admin_password: str = "Admin@123"

    ci: bool = False
    headless_flag: bool = False
    environment: str = "development"

    screenshot_dir: Path = Path("screenshots")
    download_dir: Path = Path("downloads")

    class Config:
        frozen = True

    @field_validator("api_base_url", "base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @property
    def is_ci(self) -> bool:
        return self.ci

    @property
    def is_headless(self) -> bool:
        return self.headless_flag or self.ci


def _env_flag(name: str) -> bool:
    return bool(os.getenv(name))


@lru_cache
def get_settings() -> Settings:
    load_dotenv(override=False)
    return Settings(
        api_base_url=os.getenv("API_BASE_URL", DEFAULT_API_BASE_URL),
        base_url=os.getenv("BASE_URL", DEFAULT_BASE_URL),
        test_username=os.getenv("TEST_USERNAME", "testuser@pumpmaster.com"),
        test_password=os.getenv("TEST_PASSWORD", "Test@123"),
        api_username=os.getenv("API_USERNAME", "test@pumpmaster.com"),
        api_password=os.getenv("API_PASSWORD", "Test@123"),
        engineer_username=os.getenv("ENGINEER_USERNAME", "engineer@pumpmaster.com"),
        engineer_password=os.getenv("ENGINEER_PASSWORD", "Engineer@123"),
        admin_username=os.getenv("ADMIN_USERNAME", "admin@pumpmaster.com"),
        admin_password=os.getenv("ADMIN_PASSWORD", "Admin@123"),
        ci=_env_flag("CI"),
        headless_flag=os.getenv("HEADLESS", "").lower() == "true",
        environment=os.getenv("PUMPMASTER_ENV", "development"),
        screenshot_dir=Path(os.getenv("SCREENSHOT_DIR", "screenshots")),
        download_dir=Path(os.getenv("DOWNLOAD_DIR", "downloads")),
    )


def setup_logging(verbose: bool = False):
    """Configure logging for ad-hoc runs outside pytest."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
