class NextSetError(Exception):
    """Base class for errors raised by the service layer."""

    status_code = 400


class NotFound(NextSetError):
    status_code = 404


class InvalidInput(NextSetError):
    status_code = 422


class PersistenceFailure(NextSetError):
    """The store could not apply the pending change set.

    The session has already been rolled back when this is raised, so the
    in-memory state matches what is stored.
    """

    status_code = 503
