"""Exceptions raised by the scopegrant domain layer."""


class ScopeGrantError(Exception):
    """Base class for all scopegrant errors."""
    pass


class ValidationError(ScopeGrantError):
    """Raised when a structural or referential precondition is violated."""
    pass


class IdentityGenerationError(ScopeGrantError):
    """Raised when a public id could not be generated.

    The underlying failure is always chained as ``__cause__``.
    """
    pass


class ResolutionError(ScopeGrantError):
    """Raised when the owning scope of a resource cannot be resolved."""
    pass


class ScopeNotFoundError(ResolutionError):
    """Raised when a scope id does not reference an existing scope."""

    def __init__(self, scope_id: str) -> None:
        self.scope_id = scope_id
        super().__init__(f"scope {scope_id} not found")
