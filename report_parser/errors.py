"""Exceptions raised by the report parser."""


class ReportParserError(Exception):
    """Base class for report parser failures."""


class ReportParseError(ReportParserError):
    """The input could not be parsed into a document tree."""


class FetchError(ReportParserError):
    """The source document could not be retrieved."""
