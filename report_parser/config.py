"""
Runtime settings, read from the environment.

`main` loads a `.env` file first, so any of these can live there too.
"""

import os
from dataclasses import dataclass, field


@dataclass
class ReportConfig:
    # Root directory of the local blob store used by the publisher
    output_root: str = field(default_factory=lambda: os.getenv("REPORT_OUTPUT_ROOT", "data"))
    # Public prefix that published object keys are served under
    cdn_base_url: str = field(
        default_factory=lambda: os.getenv("REPORT_CDN_BASE_URL", "https://cdn.cod-stats.jconet.ltd").rstrip("/")
    )
    fetch_timeout: float = field(default_factory=lambda: float(os.getenv("REPORT_FETCH_TIMEOUT", "30")))
    user_agent: str = field(default_factory=lambda: os.getenv("REPORT_USER_AGENT", "report-parser/0.1"))


def load_config() -> ReportConfig:
    return ReportConfig()
