"""
sshhop exception hierarchy.

Library code raises these; only the CLI turns them into exit codes.
"""


class HopError(Exception):
    """Base exception for all sshhop errors."""

    exit_code = 1

    def __init__(self, message: str, context: str | None = None):
        self.message = message
        self.context = context
        super().__init__(self.format_message())

    def format_message(self) -> str:
        """Format error message with optional context."""
        if self.context:
            return f"{self.message} ({self.context})"
        return self.message


class UsageError(HopError):
    """Raised when the command line cannot be resolved into a hop chain."""

    pass


class MalformedAddress(UsageError):
    """Raised when a hop or destination token is not [user@]host[:port]."""

    pass


class MissingHopArgument(UsageError):
    """Raised when -J is the last token."""

    pass


class NoHopsProvided(UsageError):
    """Raised when no -J hop was given."""

    pass


class MissingDestination(UsageError):
    """Raised when destination host or port is missing."""

    pass


class UnexpectedArgument(UsageError):
    """Raised when more than two trailing tokens remain."""

    pass


class ConfigError(HopError):
    """Raised when the configuration file is invalid or unreadable."""

    pass


class ExternalProgramNotFound(HopError):
    """Raised when the relay program is not on PATH."""

    def __init__(self, program: str):
        self.program = program
        super().__init__(f"'{program}' not found", "is OpenSSH installed and on PATH?")


class ExternalProgramFailed(HopError):
    """Raised when the relay program exits non-zero. Its code is propagated as is."""

    def __init__(self, program: str, exit_code: int):
        self.program = program
        self.exit_code = exit_code
        super().__init__(f"{program} exited with code {exit_code}")
