# domain/credentials.py
from __future__ import annotations

from dataclasses import dataclass, field
from urllib.parse import urlparse

from domain.exceptions import ValidationError

DEFAULT_API_BASE_URL = "https://api.stripe.com"


@dataclass(frozen=True)
class Credentials:
    api_key: str = field(repr=False)
    api_base_url: str = DEFAULT_API_BASE_URL
    api_version: str = ""
    profile: str = "default"

    def __post_init__(self) -> None:
        if not self.api_key or not self.api_key.strip():
            raise ValidationError("API key must not be empty")
        url = urlparse(self.api_base_url or "")
        if url.scheme not in ("http", "https") or not url.netloc:
            raise ValidationError(
                f"API base URL must be an absolute http(s) URL, got: {self.api_base_url!r}"
            )

    @property
    def masked_key(self) -> str:
        if len(self.api_key) <= 4:
            return "****"
        return "*" * (len(self.api_key) - 4) + self.api_key[-4:]

    def __repr__(self) -> str:
        return (
            f"Credentials(profile={self.profile!r}, api_key={self.masked_key!r}, "
            f"api_base_url={self.api_base_url!r}, api_version={self.api_version!r})"
        )
