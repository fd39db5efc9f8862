# domain/webhook_endpoint.py
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class WebhookEndpoint(BaseModel):
    """A webhook endpoint configured on the account"""
    model_config = ConfigDict(extra="ignore")

    application: Optional[str] = None
    enabled_events: List[str] = Field(default_factory=list)
    url: str = ""


class WebhookEndpointList(BaseModel):
    """Webhook endpoints returned by one listing call"""
    model_config = ConfigDict(extra="ignore")

    data: List[WebhookEndpoint] = Field(default_factory=list)
