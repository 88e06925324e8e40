from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any, List, Optional


class RecipientProfile(BaseModel):
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    recipient_name: str = Field(..., min_length=1, description="Who the gift is for (e.g., 'Priya')")
    age: str = Field(..., min_length=1, description="Age as typed by the user (e.g., '29', 'thirties')")
    gender: str = Field(..., min_length=1, description="Gender label (e.g., 'Not specified')")
    relationship: str = Field(..., min_length=1, description="Relationship to giver (e.g., friend, partner)")
    interests: str = Field(..., min_length=1, description="Hobbies/interests, free text")
    budget: str = Field(..., min_length=1, description="Budget label (e.g., '$25-$50')")
    preferred_gift_type: str = Field(..., min_length=1, description="Experiences, Physical, DIY, ...")


class GiftIdea(BaseModel):
    """One suggestion. Reads whatever the model wrote without rejecting it."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = ""
    description: str = ""
    reason: str = ""
    price_range: str = Field("", alias="priceRange")
    where_to_buy: List[str] = Field(default_factory=list, alias="whereToBuy")
    recommended_brands: List[str] = Field(default_factory=list, alias="recommendedBrands")

    @field_validator("name", "description", "reason", "price_range", mode="before")
    @classmethod
    def _as_text(cls, v: Any) -> str:
        if v is None:
            return ""
        return v if isinstance(v, str) else str(v)

    @field_validator("where_to_buy", "recommended_brands", mode="before")
    @classmethod
    def _as_names(cls, v: Any) -> List[str]:
        if v is None:
            return []
        # "Amazon, Target" instead of an array
        if isinstance(v, str):
            return [s.strip() for s in v.split(",") if s.strip()]
        if isinstance(v, (list, tuple)):
            return [x if isinstance(x, str) else str(x) for x in v if x is not None]
        return [str(v)]


class GenerationResult(BaseModel):
    success: bool
    data: Optional[List[GiftIdea]] = None
    error: Optional[str] = None
    fallback: Optional[bool] = None

    @classmethod
    def ok(cls, ideas: List[GiftIdea]) -> "GenerationResult":
        return cls(success=True, data=ideas)

    @classmethod
    def failed(cls, error: str) -> "GenerationResult":
        # fallback.py imports this module
        from .fallback import fallback_gift_ideas

        return cls(success=False, error=error, fallback=True, data=fallback_gift_ideas())
