"""Spira REST client backed by requests."""

from spira_client_impl.spira_impl import (
    ArtifactNotFoundError,
    SpiraAuthError,
    SpiraClient,
    SpiraError,
    get_client,
)

__all__ = ["ArtifactNotFoundError", "SpiraAuthError", "SpiraClient", "SpiraError", "get_client"]
