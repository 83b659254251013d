"""Exception classes for fdmap."""


class FdMapError(Exception):
    """Base exception for all fdmap errors."""


class InvalidListModeError(FdMapError, ValueError):
    """Raised when a list is created with a mode other than 'fifo' or 'ordered'."""


class HandleDestroyedError(FdMapError):
    """Raised when operations are attempted on a destroyed list or map."""
