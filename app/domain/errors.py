"""
Domain errors for the gateway.

All errors raised from the domain and application layers are defined here.
They are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""


class GatewayDomainError(Exception):
    """Base error for all gateway domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class ValidationError(GatewayDomainError):
    """Raised when caller input is malformed."""

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(f"Invalid {field}: {reason}")
        self.field = field
        self.reason = reason


class InvalidCredentialError(GatewayDomainError):
    """Raised when a credential is expired, malformed or badly signed.

    The three causes share one message so callers cannot tell them apart.
    """

    def __init__(self) -> None:
        super().__init__("Invalid or expired credential")


class ForbiddenError(GatewayDomainError):
    """Raised when a valid identity lacks a required permission."""

    def __init__(self, permission: str) -> None:
        super().__init__(f"Permission '{permission}' required")
        self.permission = permission


class NotFoundError(GatewayDomainError):
    """Raised when a referenced entity does not exist."""

    def __init__(self, entity: str, entity_id: str) -> None:
        super().__init__(f"{entity} not found: {entity_id}")
        self.entity = entity
        self.entity_id = entity_id


class UpstreamUnavailableError(GatewayDomainError):
    """Raised when an external collaborator fails or times out."""

    def __init__(self, service: str, reason: str) -> None:
        super().__init__(f"Upstream {service} unavailable: {reason}")
        self.service = service
        self.reason = reason


class ConfigurationError(GatewayDomainError):
    """Raised for missing signing secrets or a corrupt tier catalog.

    Fatal: must never be swallowed.
    """

    def __init__(self, reason: str) -> None:
        super().__init__(f"Configuration error: {reason}")
        self.reason = reason
