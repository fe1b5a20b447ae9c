"""
Exception hierarchy for dump failures.

Every exception carries the process exit code the command line reports.
"""


class DumpError(Exception):
    """Base class for dump failures."""

    exit_code = 1


class ConfigurationError(DumpError):
    """Invalid layout or offset bounds, detected before any output."""

    exit_code = 2


class DumpIOError(DumpError):
    """Open, stat, seek or read failure on the byte source.

    Attributes:
        stage: which operation failed ("Open", "Stat", "Seek", "Read", "ReadAll")
    """

    exit_code = 1

    def __init__(self, stage: str, detail: str):
        super().__init__(f"{stage} Error ==> {detail}")
        self.stage = stage
        self.detail = detail
