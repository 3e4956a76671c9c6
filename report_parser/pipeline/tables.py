"""
Table lookup and materialization.

A table belongs to the subsection heading it follows. Rows are keyed by the
table's <th> texts; a row is only kept when its <td> count matches the
header count exactly.
"""

import logging

from bs4.element import Tag

from report_parser.state import RowRecord

logger = logging.getLogger(__name__)

_HEADING_TAGS = ("h1", "h2")


def find_next_table(start: Tag) -> Tag | None:
    """Return the first <table> sibling after `start`, or None if a heading comes first."""
    for sibling in start.next_siblings:
        if not isinstance(sibling, Tag):
            continue
        if sibling.name in _HEADING_TAGS:
            return None
        if sibling.name == "table":
            return sibling
    return None


def materialize_table(table: Tag) -> list[RowRecord]:
    """Convert a <table> into row records keyed by header text.

    Duplicate header names are kept as-is, so a later column overwrites an
    earlier one with the same name inside a record.
    """
    headers = [th.get_text().strip() for th in table.find_all("th")]
    if not headers:
        return []

    records: list[RowRecord] = []
    dropped = 0
    for row in table.find_all("tr"):
        cells = row.find_all("td")
        if len(cells) != len(headers):
            dropped += 1
            continue
        record: RowRecord = {}
        for header, cell in zip(headers, cells):
            record[header] = cell.get_text().strip()
        records.append(record)

    logger.debug("Table: %d columns, %d rows kept, %d skipped", len(headers), len(records), dropped)
    return records
