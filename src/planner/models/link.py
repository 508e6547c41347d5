"""Pydantic models for a trip's important links."""

from pydantic import BaseModel, ConfigDict, Field


class Link(BaseModel):
    id: str
    title: str
    url: str


class LinkCreateRequest(BaseModel):
    trip_id: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    url: str


class CreatedLink(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    link_id: str = Field(..., alias="linkId")
