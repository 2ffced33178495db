class CliqueEnumError(Exception):
    """Base class for every error raised by the clique search package."""


class InvalidGraphError(CliqueEnumError, ValueError):
    pass


class InvalidSeedError(CliqueEnumError, ValueError):
    pass


class InvalidConfigError(CliqueEnumError, ValueError):
    pass


class ReportingError(CliqueEnumError, RuntimeError):
    """Raised when a reporter fails while a search is running.

    The search is aborted; accumulators hold everything counted before the failure.
    """
