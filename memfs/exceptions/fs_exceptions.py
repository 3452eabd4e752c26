"""
Filesystem Exceptions

Exceptions raised by in-memory file handles and the path registry.
Each carries a numeric error code and structured context so callers
can match on the kind of failure rather than on message text.

Version: 1.0.0
"""

from typing import Optional, Any


class MemFSError(Exception):
    """
    Base exception for all MemFS errors.

    Attributes:
        message: Human-readable error description
        error_code: Numeric error code for programmatic handling
        context: Additional context about the error
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code or 5000
        self.context = context or {}

    def __str__(self) -> str:
        base = f"[Error {self.error_code}] {self.message}"
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            base = f"{base} ({context_str})"
        return base

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"error_code={self.error_code})"
        )


class FileSystemException(MemFSError):
    """
    Base exception for file handle and registry errors.

    Attributes:
        path: File path associated with the error (if applicable)
    """

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        error_code: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        if path is not None:
            ctx["path"] = path
        super().__init__(message, error_code=error_code, context=ctx)
        self.path = path


class ClosedFileError(FileSystemException, ValueError):
    """
    Operation attempted on a closed file handle.

    Every positional and mutating operation checks the closed flag
    first. Closing an already closed handle raises this too.

    Example:
        >>> raise ClosedFileError("test.txt", operation="read")
    """

    def __init__(
        self,
        path: Optional[str] = None,
        operation: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        if operation:
            ctx["operation"] = operation
        super().__init__(
            message="File is closed",
            path=path,
            error_code=5001,
            context=ctx
        )
        self.operation = operation


class EndOfDataError(FileSystemException, EOFError):
    """
    Read position is at or past the end of the buffer.

    Signals exhaustion rather than a failure; no bytes were copied.
    """

    def __init__(
        self,
        path: Optional[str] = None,
        position: Optional[int] = None,
        size: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        if position is not None:
            ctx["position"] = position
        if size is not None:
            ctx["size"] = size
        super().__init__(
            message="End of data",
            path=path,
            error_code=5002,
            context=ctx
        )
        self.position = position
        self.size = size


class InvalidWhenceError(FileSystemException, ValueError):
    """
    Unrecognized seek origin.

    Example:
        >>> raise InvalidWhenceError(7)
    """

    def __init__(
        self,
        whence: Any,
        path: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        ctx["whence"] = whence
        super().__init__(
            message=f"Invalid whence: {whence!r}",
            path=path,
            error_code=5003,
            context=ctx
        )
        self.whence = whence


class InvalidPositionError(FileSystemException, ValueError):
    """
    A seek or positional access would land on a negative offset.

    Example:
        >>> raise InvalidPositionError(-1, operation="seek")
    """

    def __init__(
        self,
        position: int,
        path: Optional[str] = None,
        operation: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        ctx["position"] = position
        if operation:
            ctx["operation"] = operation
        super().__init__(
            message=f"Invalid position: {position}",
            path=path,
            error_code=5004,
            context=ctx
        )
        self.position = position
        self.operation = operation


class InvalidPathError(FileSystemException, ValueError):
    """
    Path fails the path-validity rule.

    Raised before any lookup, so a path containing '..' never
    produces PathNotFoundError.

    Example:
        >>> raise InvalidPathError("../secret.txt", reason="'..' element")
    """

    def __init__(
        self,
        path: Any,
        reason: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        if reason:
            ctx["reason"] = reason
        super().__init__(
            message=f"Invalid path: {path!r}",
            path=path,
            error_code=5005,
            context=ctx
        )
        self.reason = reason


class PathNotFoundError(FileSystemException, LookupError):
    """
    The path is valid but not present in the registry.

    Example:
        >>> raise PathNotFoundError("missing.txt")
    """

    def __init__(
        self,
        path: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=f"File not found: {path}",
            path=path,
            error_code=5006,
            context=context
        )


class ConfigValidationError(MemFSError):
    """Raised when configuration loading or validation fails."""

    def __init__(
        self,
        message: str,
        key: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        if key:
            ctx["key"] = key
        super().__init__(message, error_code=5100, context=ctx)
        self.key = key
