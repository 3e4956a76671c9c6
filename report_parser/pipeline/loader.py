"""
Report loading: fetch over HTTP with requests, or read from disk.
"""

import logging
from pathlib import Path

import requests

from report_parser.config import ReportConfig, load_config
from report_parser.errors import FetchError

logger = logging.getLogger(__name__)


def is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def fetch_html(url: str, config: ReportConfig | None = None) -> str:
    """GET `url` and return the body as text. Non-2xx responses raise FetchError."""
    config = config or load_config()
    try:
        response = requests.get(
            url,
            headers={"User-Agent": config.user_agent},
            timeout=config.fetch_timeout,
        )
    except requests.RequestException as exc:
        raise FetchError(f"Failed to fetch file: {exc}") from exc

    if not response.ok:
        raise FetchError(f"Failed to fetch file: {response.status_code} {response.reason}")
    return response.text


def read_html(path: str | Path) -> str:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Report not found: {path}")
    return path.read_text(encoding="utf-8")


def load_document(state: dict) -> dict:
    """Pipeline step: load the report markup named by state["source"]."""
    source = state["source"]
    if is_url(source):
        logger.info("Fetching %s", source)
        html = fetch_html(source, state.get("config"))
    else:
        logger.info("Reading %s", source)
        html = read_html(source)

    logger.info("Loaded %d characters", len(html))
    return {"html": html}
