# infrastructure/url/base_url_resolver.py
from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import urljoin


@dataclass(frozen=True)
class BaseUrlResolver:
    base_url: str

    def resolve_url(self, path: str) -> str:
        if path.startswith(("http://", "https://")):
            return path
        if not self.base_url:
            raise ValueError("API base URL is not configured")
        # keeps any path prefix on the base, e.g. a local mock at http://localhost:12111/stripe
        return urljoin(self.base_url.rstrip("/") + "/", path.lstrip("/"))
