"""
Small helpers shared by the app factory, config and routers.
"""
import logging
from typing import Optional
from pathlib import Path
from urllib.parse import urlparse

logger = logging.getLogger(__name__)

FRONTEND_DIR_NAME = "public"


def find_frontend_path(main_file_path: Optional[Path] = None, frontend_dir: Optional[str] = None) -> Path:
    """
    Find the frontend directory (the one holding index.html).

    An explicit frontend_dir wins when it contains index.html. Otherwise the
    current working directory and the project root are checked, each both
    directly and under a ``public/`` subfolder.

    Args:
        main_file_path: Optional Path to main.py, used to locate the project root.
                       If None, the location of utils.py is used instead.
        frontend_dir: Optional configured directory (FRONTEND_DIR).

    Returns:
        Path to the frontend directory; falls back to cwd when nothing is found
    """
    if frontend_dir:
        configured = Path(frontend_dir)
        if (configured / "index.html").exists():
            logger.info(f"Using configured frontend directory: {configured}")
            return configured
        logger.warning(f"FRONTEND_DIR {configured} has no index.html, searching defaults")

    # backend/ad_analyzer/main.py -> project root
    if main_file_path:
        project_root = main_file_path.parent.parent.parent
    else:
        project_root = Path(__file__).parent.parent.parent

    possible_paths = [
        Path.cwd() / FRONTEND_DIR_NAME,
        Path.cwd(),
        project_root / FRONTEND_DIR_NAME,
        project_root,
    ]

    for path in possible_paths:
        if (path / "index.html").exists():
            logger.info(f"Found frontend files at: {path}")
            return path

    logger.warning(f"Frontend path not found, using current working directory: {Path.cwd()}")
    return Path.cwd()


def extract_origin(url: str | None) -> Optional[str]:
    """Return the origin (scheme + host [+ port]) from a URL-like string."""
    if not url:
        return None
    parsed = urlparse(url.strip())
    if parsed.scheme and parsed.netloc:
        return f"{parsed.scheme}://{parsed.netloc}"
    return None
