"""Domain layer errors.

Every error carries a stable ``code`` that the API layer returns as the
``error`` field of the response body.
"""


class DomainError(Exception):
    """Base domain error."""

    code = "domain_error"


class ValidationError(DomainError):
    """Missing or malformed input."""

    code = "validation_error"


class ConflictError(DomainError):
    """Uniqueness violation (email or phone already registered)."""

    code = "conflict"


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    code = "not_found"

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class InvalidCredentialsError(DomainError):
    """Unknown email or wrong password.

    The message is the same for both so callers cannot enumerate accounts.
    """

    code = "invalid_credentials"

    def __init__(self):
        super().__init__("Invalid email or password")


class PendingApprovalError(DomainError):
    """Account exists but has not been approved by a moderator yet."""

    code = "pending_approval"

    def __init__(self):
        super().__init__("Your account is pending approval")


class NotAuthenticatedError(DomainError):
    """Missing, invalid or expired session token."""

    code = "not_authenticated"


class RateLimitedError(DomainError):
    """A reset secret is still active for this account."""

    code = "rate_limited"

    def __init__(self):
        super().__init__(
            "A password reset is already in progress. Try again once it expires."
        )


class InvalidOrExpiredError(DomainError):
    """Reset secret did not match, was already used, or has expired.

    Deliberately does not say which.
    """

    code = "invalid_or_expired"

    def __init__(self):
        super().__init__("Invalid or expired reset token")


class UpstreamError(DomainError):
    """An external service (email, chat) failed or timed out."""

    code = "upstream_error"

    def __init__(self, service: str, message: str):
        self.service = service
        super().__init__(f"{service} failed: {message}")
