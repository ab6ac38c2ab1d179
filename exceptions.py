#!/usr/bin/env python3

"""Custom exceptions for openpr components."""


class ClientException(Exception):
    """Exception raised by openpr client operations."""

    pass


class ConfigException(ClientException):
    """Raised when required configuration is missing or invalid."""

    pass


class GitOperationsException(ClientException):
    """Raised when a git command fails."""

    pass


class MalformedRemoteUrlException(ClientException):
    """Raised when the owner or repository can't be read from a remote URL."""

    pass


class ForgeAPIException(ClientException):
    """Raised when GitHub answers a request with an error response."""

    def __init__(self, message: str, status: int = 0):
        super().__init__(message)
        self.message = message
        self.status = status


class TransportException(Exception):
    """Unexpected transport-level failure talking to GitHub.

    Not a ClientException on purpose: handlers for expected failures must
    never swallow it.
    """

    pass


class OperatorAbort(Exception):
    """Raised when the operator declines to proceed."""

    pass
