"""Defines the exceptions raised while translating ssh/scp invocations"""


class GcloudSshError(Exception):
    """Base class for every fatal error of an invocation"""


class UnclosedQuoteError(GcloudSshError, ValueError):
    """Raised when a command line ends inside a quoted span"""

    def __init__(self, command_line: str):
        self.command_line = command_line
        super().__init__(f"Unclosed quote in command line: {command_line}")


class ClassificationError(GcloudSshError, ValueError):
    """Raised when an argument list cannot be turned into a run request"""


class EmptyDestinationError(ClassificationError):
    def __init__(self):
        super().__init__("Empty destination")


class EmptySourceError(ClassificationError):
    def __init__(self):
        super().__init__("Empty source")


class EmptyCommandError(ClassificationError):
    def __init__(self):
        super().__init__("Empty command")


class MissingFlagValueError(ClassificationError):
    def __init__(self, flag: str):
        self.flag = flag
        super().__init__(f"Missing value for argument: {flag}")


class InstanceNotFoundError(GcloudSshError, LookupError):
    """Raised when no running instance in the search space owns an address"""

    def __init__(self, address: str):
        self.address = address
        super().__init__(f"Not found networkIP: {address}")


class ConfigurationError(GcloudSshError):
    """Raised when the environment does not describe a usable configuration"""


class CommandNotFoundError(GcloudSshError):
    """Raised when an external executable cannot be found"""

    def __init__(self, executable: str):
        self.executable = executable
        super().__init__(f"Executable not found: {executable}")


class CommandStartError(GcloudSshError):
    """Raised when an external executable exists but cannot be started"""

    def __init__(self, executable: str, error: OSError):
        self.executable = executable
        self.error = error
        super().__init__(f"Cannot run {executable}: {error.strerror or error}")


class HasIdentityFileError(Exception):
    """Signals that scp was given an identity file and must run the system scp instead

    This is not a failure: the caller falls back to the system scp with the original arguments.
    """

    def __init__(self, identity_file: str | None = None):
        self.identity_file = identity_file
        super().__init__("Has identity file")
