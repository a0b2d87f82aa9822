"""Core artifact client contract definitions."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from spira_client_interface.dto import SpiraDto

__all__ = ["ArtifactClient", "ArtifactNotFoundError"]

D = TypeVar("D", bound=SpiraDto)


class ArtifactNotFoundError(Exception):
    """Base exception raised when an artifact cannot be found by the client."""


class ArtifactClient(ABC, Generic[D]):
    """CRUD calls shared by every project-scoped Spira artifact.

    Tasks, incidents and requirements all follow this shape. The DTO type
    parameter is the record the implementation sends and receives.
    """

    # ------------------------------------------------------------------
    # Artifact CRUD (create, read, update, delete)
    # ------------------------------------------------------------------
    @abstractmethod
    def list_my(self) -> list[D]:
        """Return the artifacts owned by the currently authenticated user."""
        raise NotImplementedError

    @abstractmethod
    def get(self, project_id: int, artifact_id: int) -> D:
        """Get a single artifact.

        Args:
            project_id:  The id of the project the artifact belongs to
            artifact_id: The id of the artifact

        Raises:
            ArtifactNotFoundError: If no artifact with that id exists
        """
        raise NotImplementedError

    @abstractmethod
    def create(self, project_id: int, artifact: D) -> D:
        """Create an artifact in the project and return it as stored by the server."""
        raise NotImplementedError

    @abstractmethod
    def update(self, project_id: int, artifact: D) -> None:
        """Update an artifact.

        Notes on usage:
            The artifact must carry its id and the concurrency date it was
            read with, otherwise the server rejects the edit.
        """
        raise NotImplementedError

    @abstractmethod
    def delete(self, project_id: int, artifact_id: int) -> None:
        """Delete an artifact.

        Raises:
            ArtifactNotFoundError: If no artifact with that id exists.
        """
        raise NotImplementedError
