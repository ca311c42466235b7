# File: app/core/errors.py

"""
Fatal startup errors.

Nothing after startup can fail, so these are only ever raised while the
process is coming up. The entrypoint logs them and exits with status 1.
"""


class StartupError(Exception):
    """Base class for errors that abort startup."""


class StoreConnectionError(StartupError):
    """The database is unreachable or misconfigured."""


class ListenError(StartupError):
    """The server could not bind its listening socket."""
