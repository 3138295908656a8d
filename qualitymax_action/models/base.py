"""Base model for QualityMax API payloads."""

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Immutable payload model.

    Fields the service adds in newer API versions are ignored.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")
