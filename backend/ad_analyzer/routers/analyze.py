"""
Ad analysis API.
POST /analyzeAd
Body: { adText, goal, imgSignals?: { hasPerson, hasProduct, hasOfferText } }.
Missing adText or goal returns 400 with an "error" field.
"""
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from ad_analyzer.schemas import AnalysisResult, AnalyzeAdRequest, AnalyzeErrorResponse
from ad_analyzer.services.analyzer import InvalidAdRequest, run_ad_analysis

router = APIRouter(tags=["analysis"])
logger = logging.getLogger(__name__)


def get_ad_reviewer(request: Request):
    """The reviewer created at startup; overridden in tests."""
    return request.app.state.ad_reviewer


@router.post(
    "/analyzeAd",
    response_model=AnalysisResult,
    responses={400: {"model": AnalyzeErrorResponse}},
)
async def analyze_ad(
    body: AnalyzeAdRequest,
    reviewer=Depends(get_ad_reviewer),
):
    """Score ad copy for a goal and attach AI feedback."""
    try:
        return await run_ad_analysis(body, reviewer)
    except InvalidAdRequest as e:
        logger.info("Rejected analyze request: %s", e)
        return JSONResponse(status_code=400, content={"error": str(e)})
