"""
Standard exit codes for multimod commands.

Following Unix/POSIX conventions for command-line tools.
"""

GENERAL_ERROR = 1        # General errors

# Application-specific exit codes (64-113 are typically available)
NOT_FOUND = 64           # Requested module, module set or repository not found
CONFIG_ERROR = 66        # Versioning file or tool configuration error
DATA_ERROR = 70          # Inconsistent versioning metadata
INTERRUPTED = 130        # Terminated by Ctrl+C (SIGINT)


class CommandError(Exception):
    """
    Exception that commands can raise to indicate specific exit codes.
    """
    def __init__(self, message: str, exit_code: int = GENERAL_ERROR):
        super().__init__(message)
        self.exit_code = exit_code
