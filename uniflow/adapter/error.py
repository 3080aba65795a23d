"""Infrastructure layer errors."""

from uniflow.domain.error import RepositoryError


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class ProviderError(AdapterError):
    """External provider error."""

    pass


class PersistenceError(AdapterError, RepositoryError):
    """Database driver or connection error."""

    pass
