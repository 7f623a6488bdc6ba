# Error types raised by the playerctl wrapper
#
# - LaunchError: playerctl could not be started at all
# - ExecutionError: playerctl ran and exited non-zero
# - MetadataParseError: playerctl ran fine but printed something we can't parse

from typing import Optional, Sequence


class PlayerctlError(Exception):
    """Base class for everything this package raises."""


class LaunchError(PlayerctlError):
    def __init__(self, cmd: Sequence[str], reason: str):
        self.cmd = list(cmd)
        self.reason = reason
        super().__init__(f"could not start {self.cmd[0]!r}: {reason}")


class ExecutionError(PlayerctlError):
    def __init__(self, cmd: Sequence[str], returncode: int, stderr: str = ""):
        self.cmd = list(cmd)
        self.returncode = returncode
        self.stderr = stderr
        detail = stderr or "no error output"
        super().__init__(f"{' '.join(self.cmd)} exited with status {returncode}: {detail}")


class MetadataParseError(PlayerctlError):
    def __init__(self, message: str, line: str = "", field: Optional[str] = None, value: Optional[str] = None):
        self.line = line
        self.field = field
        self.value = value
        super().__init__(message)
