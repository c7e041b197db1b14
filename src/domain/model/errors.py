"""Domain-level exceptions.

Services raise these errors to express business rule violations.
Route handlers catch them and map to appropriate HTTP status codes.
"""


class DomainError(Exception):
    """Base class for all domain errors."""


class NotFoundError(DomainError):
    """Requested entity does not exist."""


class ValidationError(DomainError):
    """Input violates a business validation rule."""


class ConfigurationError(DomainError):
    """No usable dictionary source is configured for the pipeline."""


class SourceUnavailableError(DomainError):
    """A single dictionary source failed or returned nothing usable."""

    def __init__(self, source_id: str, reason: str):
        self.source_id = source_id
        self.reason = reason
        super().__init__(f"Dictionary source '{source_id}' unavailable: {reason}")


class ResolutionEmptyError(DomainError):
    """No dictionary source produced usable data for a headword."""

    def __init__(self, headword: str):
        self.headword = headword
        super().__init__(f"No dictionary data for '{headword}'")


class PersistenceError(DomainError):
    """The repository refused to store the next collection state."""
