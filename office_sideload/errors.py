"""
Errors
Exception types raised while reading, registering and unregistering add-ins.
"""

from enum import Enum


class ExpectedError(Exception):
    """A problem with the user's input, reported to them verbatim."""


class ManifestError(ExpectedError):
    """The manifest file could not be read or parsed."""


class RegistrationErrorKind(Enum):
    """Stage of registration that failed."""
    INPUT = "input"
    LINK = "link"
    PUBLISH = "publish"


class RegistrationError(Exception):
    """
    Registration failed.
    
    Every failure inside register_addin surfaces as this single type. The
    stage is available as `kind` and the original exception as `cause`
    (also chained as __cause__).
    """
    
    MESSAGE = "Unable to register the Office Add-in."
    
    def __init__(self, kind: RegistrationErrorKind, cause: BaseException):
        self.kind = kind
        self.cause = cause
        super().__init__(f"{self.MESSAGE}\n{cause}")
