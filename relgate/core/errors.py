"""Error codes for CLI exit status.

These map directly to process exit codes so that a CI step can tell a
rejected release apart from a broken setup.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands.

    These values are used as process exit codes and should remain stable:
    - 0: Release is valid, outputs emitted
    - 1: Release rejected by a validation check
    - 2: User error (bad arguments, incomplete configuration)
    - 5: I/O error (event payload or manifest could not be read)
    """

    OK = 0
    VALIDATION_FAILED = 1
    USER_ERROR = 2
    IO_ERROR = 5

    def __str__(self) -> str:
        """Return human-readable name."""
        return self.name.lower().replace("_", " ")

    @property
    def is_success(self) -> bool:
        return self == ErrorCode.OK

    @property
    def is_error(self) -> bool:
        return self != ErrorCode.OK
