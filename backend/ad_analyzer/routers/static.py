"""
Static file serving routes.
"""
from pathlib import Path
from fastapi import APIRouter, HTTPException
from fastapi.responses import FileResponse, Response

from ad_analyzer.config import get_settings
from ad_analyzer.utils import find_frontend_path

router = APIRouter()

# routers/static.py -> ad_analyzer/main.py
main_file_path = Path(__file__).parent.parent / "main.py"
frontend_path = find_frontend_path(main_file_path, get_settings().frontend_dir)


def _serve_text_asset(filename: str, media_type: str) -> Response:
    file_path = frontend_path / filename
    if file_path.exists():
        return Response(content=file_path.read_text(encoding="utf-8"), media_type=media_type)
    raise HTTPException(status_code=404, detail="File not found")


if (frontend_path / "index.html").exists():
    @router.get("/", response_class=FileResponse)
    def serve_index():
        """Serve the frontend index.html"""
        return FileResponse(frontend_path / "index.html")

    @router.get("/index.html", response_class=FileResponse)
    def serve_index_html():
        """Serve the frontend index.html"""
        return FileResponse(frontend_path / "index.html")

    @router.get("/script.js")
    def serve_script():
        """Serve script.js"""
        return _serve_text_asset("script.js", "application/javascript")

    @router.get("/styles.css")
    def serve_styles():
        """Serve styles.css"""
        return _serve_text_asset("styles.css", "text/css")
