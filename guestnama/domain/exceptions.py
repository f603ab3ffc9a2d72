from __future__ import annotations


class DomainError(Exception):
    """Base for domain errors."""


class StorageError(DomainError):
    """The remote storage service failed or returned an unusable payload."""


class SessionStoreError(DomainError):
    """The persisted session could not be read."""


class MetricsUnavailableError(DomainError):
    """Dashboard metrics could not be computed from the remote records."""


class GuestNotFoundError(DomainError):
    """Guest does not exist for the current user."""
