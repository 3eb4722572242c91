# core/errors.py


class BookcaseError(Exception):
    """Base class for catalog errors that map onto a client response"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(BookcaseError):
    """A record failed a field or cross-record validation"""


class BadRequest(BookcaseError):
    """A business rule was violated by the request"""


class AlreadyAssociated(BadRequest):
    """The association being added already exists"""


class NotFound(BookcaseError):
    """A referenced record does not exist"""
