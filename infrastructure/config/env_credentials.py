# infrastructure/config/env_credentials.py
from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, Mapping, Optional

from dotenv import dotenv_values, find_dotenv

from domain.credentials import DEFAULT_API_BASE_URL, Credentials
from domain.exceptions import ValidationError

API_KEY_VAR = "STRIPE_API_KEY"
API_BASE_VAR = "STRIPE_API_BASE"
API_VERSION_VAR = "STRIPE_API_VERSION"
PROFILE_VAR = "STRIPE_PROFILE"


def default_env_path() -> Optional[Path]:
    """Nearest .env from the working directory upwards, if any."""
    found = find_dotenv(usecwd=True)
    return Path(found) if found else None


class EnvCredentialsProvider:
    """
    Builds Credentials from the process environment and an optional .env file.

    Process environment wins over .env so a one-off `STRIPE_API_KEY=... trigger`
    overrides the file.
    """

    def __init__(self, env_path: Optional[Path] = None, environ: Optional[Mapping[str, str]] = None):
        path = Path(env_path) if env_path is not None else default_env_path()
        values: Dict[str, Optional[str]] = dict(dotenv_values(path)) if path is not None and path.exists() else {}
        values.update(os.environ if environ is None else environ)
        self._values = values

    def get(self) -> Credentials:
        api_key = (self._values.get(API_KEY_VAR) or "").strip()
        if not api_key:
            raise ValidationError(f"{API_KEY_VAR} is not set; add it to the environment or .env")

        return Credentials(
            api_key=api_key,
            api_base_url=(self._values.get(API_BASE_VAR) or DEFAULT_API_BASE_URL).strip(),
            api_version=(self._values.get(API_VERSION_VAR) or "").strip(),
            profile=(self._values.get(PROFILE_VAR) or "default").strip(),
        )
