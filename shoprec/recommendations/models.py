from __future__ import annotations

from pydantic import BaseModel, Field


class RecommendationRequest(BaseModel):
    user_id: str = Field(..., min_length=1, description="Identifier of the querying user")


class PurchasedProduct(BaseModel):
    product_id: str
    rating: float
    category: str


class Recommendation(BaseModel):
    product_id: str
    category: str


class UserRecommendations(BaseModel):
    user_id: str
    purchased_products: list[PurchasedProduct] = Field(default_factory=list)
    preferred_categories: list[str] = Field(default_factory=list)
    recommendations: list[Recommendation] = Field(default_factory=list)
