"""
Schemas for ad analysis: request body and the response returned for every goal.
Field names on the wire are camelCase to match the frontend.
"""
from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, List, Optional


class ImageSignals(BaseModel):
    """What the ad image contains; any missing flag is read as False."""
    model_config = ConfigDict(populate_by_name=True)

    has_person: Optional[bool] = Field(None, alias="hasPerson")
    has_product: Optional[bool] = Field(None, alias="hasProduct")
    has_offer_text: Optional[bool] = Field(None, alias="hasOfferText")


class AnalyzeAdRequest(BaseModel):
    """Request body for POST /analyzeAd. Presence of adText and goal is checked by the analyzer."""
    model_config = ConfigDict(populate_by_name=True)

    ad_text: Optional[str] = Field(None, alias="adText")
    goal: Optional[str] = Field(None, description="clicks, conversions or awareness")
    img_signals: Optional[ImageSignals] = Field(None, alias="imgSignals")


class AnalysisResult(BaseModel):
    """Response for POST /analyzeAd. All fields are always present; unused ones are null."""
    model_config = ConfigDict(populate_by_name=True)

    goal_analyzed: Optional[str] = Field(None, alias="goalAnalyzed")
    message: Optional[str] = None
    score: Optional[int] = Field(None, ge=0, le=100)
    breakdown: Optional[Dict[str, int]] = None
    ai_summary: Optional[str] = Field(None, alias="aiSummary")
    rewrite: Optional[str] = None
    image_advice: Optional[str] = Field(None, alias="imageAdvice")
    suggestions: List[str] = Field(default_factory=list)


class AnalyzeErrorResponse(BaseModel):
    error: str
