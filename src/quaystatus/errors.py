"""Exceptions raised by the component status evaluation."""


class QuayStatusError(Exception):
    """Base exception for this package."""


class InfrastructureError(QuayStatusError):
    """Raised when readiness cannot be determined because of the environment.

    Never mapped to a Condition: the caller decides what a failed component
    means for the rest of the evaluation pass.
    """


class AccessorError(InfrastructureError):
    """Raised when the cluster API cannot be reached or answers with an error."""

    def __init__(self, kind, namespace, name, cause=None):
        self.kind = kind
        self.namespace = namespace
        self.name = name
        self.cause = cause
        super().__init__(f"Failed to read {kind} {namespace}/{name}: {cause}")


class MalformedResourceError(InfrastructureError):
    """Raised when a fetched object cannot be interpreted."""


class CheckTimeoutError(InfrastructureError):
    """Raised when a checker does not finish before its deadline."""

    def __init__(self, kind, timeout):
        self.kind = kind
        self.timeout = timeout
        super().__init__(f"Check for component {kind} timed out after {timeout}s")


class ResourceNotFoundError(QuayStatusError):
    """Raised by accessors when the requested object does not exist."""

    def __init__(self, kind, namespace, name):
        self.kind = kind
        self.namespace = namespace
        self.name = name
        super().__init__(f"{kind} {namespace}/{name} not found")


class UnknownComponentError(QuayStatusError):
    """Raised when no checker is registered for a component kind."""
