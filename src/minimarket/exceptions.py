"""
Custom exceptions
"""


class ApplicationError(Exception):
    """Base exception"""
    pass


class InvalidArgument(ApplicationError, ValueError):
    """Invalid constructor or operation argument"""
    pass
