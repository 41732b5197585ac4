"""Exception hierarchy for the data-access layer and the service above it."""

from __future__ import annotations


class ProjectsError(Exception):
    """Base class for every error raised by `projects_dao`."""


class DataAccessError(ProjectsError):
    """Storage-layer failure.

    Raw driver exceptions never escape the transaction boundary; they are
    chained as `__cause__` of this type (or one of its subclasses).
    """


class UnsupportedTypeError(DataAccessError):
    """A declared parameter or field type has no storage mapping."""


class ExtractionError(DataAccessError):
    """A result row could not be materialized into a record instance."""


class NoResultError(DataAccessError):
    """A statement expected to yield a row yielded none."""


class TransactionFailure(DataAccessError):
    """An operation failed after `BEGIN`; the transaction was rolled back."""


class NotFoundError(ProjectsError, LookupError):
    """The requested row does not exist (fetch, update, or delete by id)."""
