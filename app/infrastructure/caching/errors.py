"""Custom exceptions for the cache system."""


class CacheError(Exception):
    """Base exception for all cache errors."""

    pass


class CacheIOError(CacheError):
    """Raised by the disk tier when an entry cannot be read or written.

    Never escapes CacheService: the service logs it and treats the
    operation as a miss.

    Attributes:
        key: Cache key involved in the failed operation.
        path: File path of the disk entry, when known.
    """

    def __init__(self, message: str, key: str = "", path: str = ""):
        super().__init__(message)
        self.key = key
        self.path = path
