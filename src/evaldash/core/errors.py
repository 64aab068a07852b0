"""Exception hierarchy for evaldash."""


class EvalDashError(Exception):
    """Base class for all evaldash errors."""


class UsageError(EvalDashError):
    """Invalid or missing command-line arguments."""


class RecordParseError(EvalDashError, ValueError):
    """A metric record could not be parsed or validated.

    Raised for malformed metadata JSON, for a record whose merged fields
    are invalid, and for a corrupt line in the stored log.
    """
