from typing import Dict
from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_BASE_URL = "https://pinestore.cc"


def _default_headers() -> Dict[str, str]:
    return {"Content-Type": "application/json"}


class ClientConfig(BaseModel):
    """
    Immutable settings for a PinestoreClient.
    Build one per origin; clients pointed at different origins share nothing.
    """
    model_config = ConfigDict(frozen=True)

    base_url: str = Field(DEFAULT_BASE_URL, description="Origin the route paths are appended to")
    headers: Dict[str, str] = Field(default_factory=_default_headers)

    @field_validator('base_url')
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip('/')
