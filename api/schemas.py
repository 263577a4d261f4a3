"""
Request bodies for the API. Field aliases match the camelCase wire format.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class NewsRequest(BaseModel):
    pairs: Optional[list[str]] = None
    topics: Optional[list[str]] = None
    limit: Optional[int] = Field(default=None, ge=1, le=200)


class FeedbackRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    article_id: str = Field(alias="articleId", min_length=1)
    helpful: bool
    pairs: list[str] = Field(default_factory=list)
    topics: list[str] = Field(default_factory=list)
    timestamp: Optional[int] = None  # ms since epoch; server time if omitted


class AppearanceOverride(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    hairstyle: Optional[str] = None
    facial_hair: Optional[str] = Field(default=None, alias="facialHair")
    accessories: Optional[list[str]] = None


class AttireOverride(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    pattern: Optional[str] = None
    kit_style: Optional[str] = Field(default=None, alias="kitStyle")
    boot_color: Optional[str] = Field(default=None, alias="bootColor")


class BlueprintOverride(BaseModel):
    """Partial blueprint; every field is optional and absent means keep the base."""
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = None
    name: Optional[str] = None
    position: Optional[str] = None
    dominant_foot: Optional[str] = Field(default=None, alias="dominantFoot")
    nationality: Optional[str] = None
    age: Optional[int] = Field(default=None, ge=0, le=100)
    playing_style: Optional[str] = Field(default=None, alias="playingStyle")
    club_colors: Optional[list[str]] = Field(default=None, alias="clubColors")
    appearance: Optional[AppearanceOverride] = None
    attire: Optional[AttireOverride] = None
    personality: Optional[list[str]] = None

    def to_overrides(self) -> dict:
        """camelCase dict for merge_blueprint, without unset fields."""
        return self.model_dump(exclude_none=True, by_alias=True)


class PlayerRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    seed: Optional[int] = None
    attributes: Optional[BlueprintOverride] = None
    image_count: Optional[int] = Field(default=None, alias="imageCount")  # clamped to 1-6
