#
# src/testcommander/exceptions.py
#
"""
Custom exceptions for testcommander.
"""


class TestCommanderError(Exception):
    """Base class for all testcommander errors."""


class ConfigurationError(TestCommanderError):
    """Raised when configuration cannot be loaded or is invalid."""

    def __init__(self, message: str, path: str | None = None, details: Exception | None = None):
        self.path = path
        self.details = details
        full_message = message
        if path:
            full_message += f" (File: '{path}')"
        super().__init__(full_message)
        if details:
            self.add_note(f"Original error: {type(details).__name__}: {details}")


class DiscoveryError(TestCommanderError):
    """Raised by a discoverer when the test list could not be produced."""

    def __init__(self, message: str, directory: str | None = None, output: str | None = None):
        self.directory = directory
        self.output = output
        full_message = f"[Discovery] {message}"
        if directory:
            full_message += f" (Directory: '{directory}')"
        super().__init__(full_message)
        if output:
            self.add_note(f"Tool output: {output.strip()}")


class ExecutorError(TestCommanderError):
    """Raised when a test command could not be handed to the terminal."""

    pass


# 🔼⚙️
