from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from typing import List
from pathlib import Path
import logging
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

from ad_analyzer import __version__
from ad_analyzer.config import get_settings, get_cors_origins
from ad_analyzer.services import LLMAdReviewer, LLMService
from ad_analyzer.utils import find_frontend_path


logger = logging.getLogger(__name__)

settings = get_settings()
logging.getLogger("ad_analyzer").setLevel(settings.log_level.upper())

cors_allow_origins: List[str] = get_cors_origins(settings)

if cors_allow_origins:
    logger.info("Allowing CORS origins: %s", cors_allow_origins)


def build_ad_reviewer(settings) -> LLMAdReviewer:
    """Create the LLM-backed reviewer from settings."""
    llm_service = LLMService(
        openai_api_key=settings.openai_api_key,
        model=settings.openai_model,
        timeout_seconds=settings.llm_timeout_seconds,
        temperature=settings.openai_temperature,
    )
    return LLMAdReviewer(llm_service)


app = FastAPI(title="Ad Analyzer API", version=__version__)
app.state.ad_reviewer = build_ad_reviewer(settings)


@app.on_event("startup")
async def startup_event():
    """Report LLM configuration on startup"""
    logger.info(f"LLM reviewer configured: {app.state.ad_reviewer.is_configured()}")


app.add_middleware(
    CORSMiddleware,
    allow_origin_regex=r"https?://localhost(:\d+)?$",
    allow_origins=cors_allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/api")
def api_info():
    """API information endpoint"""
    return {"message": "Ad Analyzer backend is running", "version": __version__}


@app.get("/health")
def health_check():
    """Check the API is up and whether the LLM is configured"""
    configured = app.state.ad_reviewer.is_configured()
    return {"status": "healthy", "llm": "configured" if configured else "not_configured"}


# Include analysis router
from ad_analyzer.routers import analyze
app.include_router(analyze.router)

# Include static file serving router
from ad_analyzer.routers import static

frontend_path = find_frontend_path(Path(__file__), settings.frontend_dir)
if (frontend_path / "index.html").exists():
    # Mount static files directory to serve CSS, JS, and other assets
    app.mount("/static", StaticFiles(directory=str(frontend_path)), name="static")
    app.include_router(static.router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=settings.port)
