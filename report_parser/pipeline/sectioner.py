"""
Groups report tables under their section and subsection headings.

Every <h1> opens a section that runs until the next <h1> in document order.
Inside it, each whitelisted <h2> claims the first <table> that follows it,
as long as no other heading gets in the way.
"""

import logging

from bs4 import BeautifulSoup
from bs4.element import Tag

from report_parser.errors import ReportParseError
from report_parser.pipeline.tables import find_next_table, materialize_table
from report_parser.state import ParsedReport
from report_parser.whitelist import SECTION_WHITELIST, SUBSECTION_WHITELIST

logger = logging.getLogger(__name__)


def parse_document(html_text: str | bytes) -> BeautifulSoup:
    """Build a document tree; lxml recovers from most broken markup."""
    if not isinstance(html_text, (str, bytes)):
        raise ReportParseError(f"Input could not be parsed: expected text, got {type(html_text).__name__}")
    try:
        return BeautifulSoup(html_text, "lxml")
    except Exception as exc:
        raise ReportParseError(f"Input could not be parsed: {exc}") from exc


def extract_sections(
    root: BeautifulSoup | Tag,
    sections: frozenset[str] = SECTION_WHITELIST,
    subsections: frozenset[str] = SUBSECTION_WHITELIST,
) -> ParsedReport:
    headings = root.find_all("h1")
    parsed: ParsedReport = {}

    for i, current in enumerate(headings):
        title = current.get_text().strip()
        if title not in sections:
            continue

        # A repeated section title replaces the earlier one
        parsed[title] = {}
        tables = parsed[title]

        boundary = headings[i + 1] if i + 1 < len(headings) else None
        for sibling in current.next_siblings:
            # bs4 tags compare by content, the boundary is a specific node
            if sibling is boundary:
                break
            if not isinstance(sibling, Tag) or sibling.name != "h2":
                continue

            subtitle = sibling.get_text().strip()
            if subtitle not in subsections:
                continue

            table = find_next_table(sibling)
            if table is None:
                logger.debug("No table under %r / %r", title, subtitle)
                continue
            tables[subtitle] = materialize_table(table)
            logger.debug("  %r / %r: %d rows", title, subtitle, len(tables[subtitle]))

    return parsed


def extract(
    html_text: str | bytes,
    sections: frozenset[str] = SECTION_WHITELIST,
    subsections: frozenset[str] = SUBSECTION_WHITELIST,
) -> ParsedReport:
    """Parse report markup and return its whitelisted tables by heading."""
    return extract_sections(parse_document(html_text), sections, subsections)


def extract_report(state: dict) -> dict:
    """Pipeline step: turn the loaded HTML into the nested report structure."""
    report = extract(state["html"])
    logger.info("Extracted %d sections: %s", len(report), list(report))
    return {"report": report}
