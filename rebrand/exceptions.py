# rebrand/exceptions.py
"""
Error taxonomy for the rebrand tool.

Precondition failures carry the process exit code the CLI reports them
with. Per-entry filesystem failures are not wrapped: the OSError
propagates and halts the run.
"""


class RebrandError(Exception):
    """Base class for fatal precondition failures."""

    exit_code = 1


class ClassifierUnavailableError(RebrandError):
    """The external text/binary classification tool is not installed."""

    exit_code = 2


class InvalidRootError(RebrandError):
    """The --root path is not a directory."""

    exit_code = 3


class UsageError(RebrandError):
    """Unrecognized flags or invalid option values."""

    exit_code = 64
