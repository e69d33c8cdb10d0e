"""Process configuration read once at startup."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

DEFAULT_CREDENTIALS_FILE = "service-account.json"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000


@dataclass(frozen=True)
class Settings:
    """Configuration for the report service."""

    property_id: str
    credentials_file: Path = Path(DEFAULT_CREDENTIALS_FILE)
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT

    @classmethod
    def from_env(cls, *, dotenv: bool = True) -> "Settings":
        """Read settings from the environment, loading ``.env`` first.

        ``GA4_PROPERTY_ID`` is required. The credentials file is resolved
        against the current working directory.
        """

        if dotenv:
            load_dotenv(find_dotenv(usecwd=True))

        property_id = os.getenv("GA4_PROPERTY_ID")
        if not property_id:
            raise ValueError("GA4_PROPERTY_ID must be set")

        credentials_file = Path(
            os.getenv("GA4_CREDENTIALS_FILE", DEFAULT_CREDENTIALS_FILE)
        ).resolve()
        return cls(
            property_id=property_id,
            credentials_file=credentials_file,
            host=os.getenv("GA4REPORT_HOST", DEFAULT_HOST),
            port=int(os.getenv("GA4REPORT_PORT", DEFAULT_PORT)),
        )


__all__ = ["Settings"]
