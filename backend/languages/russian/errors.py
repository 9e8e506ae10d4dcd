"""Exceptions raised by the name declension API."""
from core.errors import AppErrorException


class ConfigError(AppErrorException):
    """The rules resource is missing, unreadable or malformed."""


class EmptyInputError(AppErrorException):
    """An empty name part was passed to an inflection or gender detection call."""
