# Response DTOs for the JSON endpoints

from typing import Any, Dict, List

from pydantic import BaseModel, Field, RootModel


class ListingResponse(RootModel[List[Dict[str, Any]]]):
    root: List[Dict[str, Any]] = Field(
        ..., description="Items of the collection, unwrapped from the Directus envelope"
    )


class ErrorResponse(BaseModel):
    error: str = Field(..., description="Generic message; upstream detail is never included")


class HealthResponse(BaseModel):
    status: str
    app_name: str
    version: str
    directus_url: str
    static_pages: int


class ReadyResponse(BaseModel):
    status: str
    directus: bool
