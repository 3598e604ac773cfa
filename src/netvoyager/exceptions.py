"""Custom exceptions for netvoyager."""


class NetvoyagerError(Exception):
    """Base exception for netvoyager operations."""


class FetchError(NetvoyagerError):
    """Error during page fetching."""


class ParseError(NetvoyagerError):
    """Error during HTML parsing."""


class InvalidSelectorError(ParseError):
    """CSS selector could not be compiled."""


class SelectionEmpty(NetvoyagerError):
    """Selector produced nothing to write."""


class WriteError(NetvoyagerError):
    """Error while writing the CSV output."""
