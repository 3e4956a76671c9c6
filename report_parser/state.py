"""
Shared types for the extraction pipeline.
"""

from pathlib import Path
from typing import TypedDict

# column header -> cell text, in column order
RowRecord = dict[str, str]

# section heading -> subsection heading -> rows
ParsedReport = dict[str, dict[str, list[RowRecord]]]


class ReportSummary(TypedDict):
    sections: int
    subsections: int
    rows: int


class PublishResult(TypedDict):
    key: str
    path: Path
    url: str
