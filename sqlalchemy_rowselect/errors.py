from enum import Enum


class Operation(Enum):
    SELECT = "select"


class Code(Enum):
    MISUSE = "misuse"


class Error(Exception):
    """
    Base class for errors reported by this package.

    Carries the identity of the database the failing cursor belongs to, the
    kind of operation that failed and a human-readable message.
    Failures coming from the engine itself are SQLAlchemy exceptions and are
    never wrapped into this class.
    """
    code = None

    def __init__(self, message, tag=None, path=None, operation=None):
        self.message = message
        self.tag = tag
        self.path = path
        self.operation = operation
        super().__init__(message)

    def __str__(self):
        parts = []
        if self.tag is not None:
            parts.append(f"tag={self.tag}")
        if self.path is not None:
            parts.append(f"path={self.path}")
        if self.operation is not None:
            parts.append(f"operation={self.operation.value}")
        if self.code is not None:
            parts.append(f"code={self.code.value}")
        parts.append(f"message={self.message}")
        return ", ".join(parts)


class MisuseError(Error):
    """
    Caller-side contract violation, detected without touching the engine.
    """
    code = Code.MISUSE
