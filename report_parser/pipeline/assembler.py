"""
pipeline/assembler.py — final shaping of the extracted report.

Optionally swaps full heading text for the short codes consumers expect.
No parsing here.
"""

import logging

from report_parser.state import ParsedReport, ReportSummary
from report_parser.whitelist import SECTION_CODES, SUBSECTION_CODES

logger = logging.getLogger(__name__)


def apply_codes(report: ParsedReport) -> ParsedReport:
    """Re-key sections and subsections by code. Headings without a code keep their text."""
    coded: ParsedReport = {}
    for title, tables in report.items():
        coded[SECTION_CODES.get(title, title)] = {
            SUBSECTION_CODES.get(subtitle, subtitle): rows
            for subtitle, rows in tables.items()
        }
    return coded


def summarize(report: ParsedReport) -> ReportSummary:
    return ReportSummary(
        sections=len(report),
        subsections=sum(len(tables) for tables in report.values()),
        rows=sum(len(rows) for tables in report.values() for rows in tables.values()),
    )


def assemble(state: dict) -> dict:
    report = state["report"]
    output = apply_codes(report) if state.get("use_codes") else report
    summary = summarize(report)

    logger.info(
        "Assembly complete: %d sections, %d subsections, %d rows",
        summary["sections"], summary["subsections"], summary["rows"],
    )
    return {"output": output, "summary": summary}
