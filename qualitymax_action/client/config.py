"""Configuration for the QualityMax API client."""

from pydantic import BaseModel, SecretStr

DEFAULT_API_BASE_URL = "https://app.qualitymax.ai/api"


class ClientConfig(BaseModel):
    """Configuration for the QualityMax API client."""

    api_key: SecretStr
    api_base_url: str = DEFAULT_API_BASE_URL
    poll_interval: float = 5.0
    user_agent: str = "QualityMax-GitHub-Action/1.0"
