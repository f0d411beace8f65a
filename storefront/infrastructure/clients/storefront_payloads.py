from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class PlanPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str | int
    name: str = ""
    price_cents: int | None = None
    interval: str | None = None
    features: list[str] | None = None
    stripe_price_id: str | None = None


class GoogleOauthUrlPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    ready: bool = False
    url: str | None = None


class LocationPayload(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    name: str = ""
    store_code: str | None = Field(default=None, alias="storeCode")


class GoogleLocationsPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    connected: bool = False
    locations: list[LocationPayload] = Field(default_factory=list)


class CheckoutSessionPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    url: str | None = None
    detail: str | None = None
