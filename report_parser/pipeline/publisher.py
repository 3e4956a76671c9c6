"""
Publishing: store the serialized report under a unique object key.

Keys are `<epoch millis>-<user id>-data`; the returned URL is the key
under the configured CDN prefix.
"""

import json
import logging
import time
from pathlib import Path

from report_parser.config import ReportConfig, load_config
from report_parser.state import ParsedReport, PublishResult

logger = logging.getLogger(__name__)


class LocalBlobStore:
    def __init__(self, root: str | Path) -> None:
        self.root = Path(root)

    def put(self, key: str, text: str) -> Path:
        path = self.root / key
        if self.root.resolve() not in path.resolve().parents:
            raise ValueError(f"Object key escapes store root: {key!r}")
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path


def object_key(user_id: str, now: float | None = None) -> str:
    millis = int((time.time() if now is None else now) * 1000)
    return f"{millis}-{user_id}-data"


def serialize(report: ParsedReport) -> str:
    return json.dumps(report, indent=2, ensure_ascii=False)


def publish(
    report: ParsedReport,
    user_id: str,
    config: ReportConfig | None = None,
    store: LocalBlobStore | None = None,
) -> PublishResult:
    if not user_id:
        raise ValueError("Missing user id")
    if "/" in user_id or "\\" in user_id or ".." in user_id:
        raise ValueError(f"Invalid user id: {user_id!r}")

    config = config or load_config()
    store = store or LocalBlobStore(config.output_root)

    key = object_key(user_id)
    path = store.put(key, serialize(report))
    url = f"{config.cdn_base_url}/{key}"

    logger.info("Published %s -> %s", path, url)
    return PublishResult(key=key, path=path, url=url)


def publish_report(state: dict) -> dict:
    """Pipeline step: publish state["report"] for state["user_id"].

    The published copy is always keyed by full heading text, even when the
    local output uses short codes.
    """
    result = publish(state["report"], state["user_id"], state.get("config"))
    return {"published": result}
