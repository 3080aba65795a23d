"""Domain layer errors.

Every error carries the client-facing message. ``details`` holds the
collaborator's own error text where one exists.
"""


class DomainError(Exception):
    """Base domain error."""

    def __init__(self, message: str, details: str | None = None):
        self.message = message
        self.details = details
        super().__init__(message)


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class MissingFieldsError(ValidationError):
    """Raised when required request fields are absent or empty."""

    def __init__(self, required: list[str], missing: list[str]):
        self.required = required
        self.missing = missing
        super().__init__(f"Missing required fields: {', '.join(required)}")


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class AlreadyLinkedError(BusinessRuleViolationError):
    """Raised when an account already has a password credential."""

    def __init__(self, account_id: str):
        self.account_id = account_id
        super().__init__("This account already has a password set")


class InvalidSetupTokenError(BusinessRuleViolationError):
    """Raised when a password setup token is unknown, expired or already used."""

    def __init__(self):
        super().__init__("Invalid or expired password setup link")


class UnauthenticatedError(DomainError):
    """Raised when a request carries no valid bearer credential."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str, message: str | None = None):
        self.resource = resource
        self.identifier = identifier
        super().__init__(message or f"{resource} not found: {identifier}")


class AccountNotFoundError(NotFoundError):
    """Raised when the identity provider has no account for an email."""

    def __init__(self, email: str):
        super().__init__("Account", email, "No account found with this email")


class ProfileNotFoundError(NotFoundError):
    """Raised when no profile document exists for an account."""

    def __init__(self, account_id: str):
        super().__init__("UserProfile", account_id, "User not found")


class ServiceUnavailableError(DomainError):
    """Raised when a required collaborator was never configured."""

    def __init__(self, service: str, message: str):
        self.service = service
        super().__init__(message)


class CollaboratorError(DomainError):
    """A configured collaborator returned an error."""

    pass


class DeliveryFailedError(CollaboratorError):
    """Email delivery provider rejected or failed a send."""

    pass


class LinkingError(CollaboratorError):
    """Identity provider failed to set the password credential."""

    pass


class StorageError(CollaboratorError):
    """Profile store or setup token ledger failed to complete an operation."""

    pass


class RepositoryError(Exception):
    """Raised by repository implementations when the backing store fails."""

    pass
