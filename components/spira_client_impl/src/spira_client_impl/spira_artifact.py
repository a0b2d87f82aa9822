"""Shared CRUD plumbing for project-scoped Spira artifacts."""
from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from spira_client_interface.client import D, ArtifactClient

if TYPE_CHECKING:
    from spira_client_impl.spira_impl import SpiraClient


class SpiraArtifactClient(ArtifactClient[D]):
    """Implementation of ArtifactClient for one artifact collection.

    Subclasses name the collection (``tasks``, ``incidents``...) and the DTO
    type; URLs follow the Spira pattern:

      GET    /{collection}                         artifacts owned by the caller
      GET    /projects/{project_id}/{collection}/{id}
      POST   /projects/{project_id}/{collection}
      PUT    /projects/{project_id}/{collection}
      DELETE /projects/{project_id}/{collection}/{id}
    """

    collection: ClassVar[str]
    dto: ClassVar[type]

    def __init__(self, client: SpiraClient) -> None:
        self._client = client

    def _project_path(self, project_id: int) -> str:
        return f"/projects/{project_id}/{self.collection}"

    def _update_path(self, project_id: int, artifact: D) -> str:
        return self._project_path(project_id)

    def list_my(self) -> list[D]:
        """Retrieve all artifacts owned by the currently authenticated user."""
        data = self._client._get(f"/{self.collection}")  # noqa: SLF001
        return self.dto.from_json_list(data)

    def get(self, project_id: int, artifact_id: int) -> D:
        """Retrieve a single artifact in the project."""
        data = self._client._get(f"{self._project_path(project_id)}/{artifact_id}")  # noqa: SLF001
        return self.dto.from_json(data)

    def create(self, project_id: int, artifact: D) -> D:
        """Create the artifact in the project and return the stored copy, ids filled in."""
        data = self._client._post(self._project_path(project_id), artifact.to_json())  # noqa: SLF001
        return self.dto.from_json(data)

    def update(self, project_id: int, artifact: D) -> None:
        """Write the artifact back; it must carry its id and the concurrency date it was read with."""
        self._client._put(self._update_path(project_id, artifact), artifact.to_json())  # noqa: SLF001

    def delete(self, project_id: int, artifact_id: int) -> None:
        """Delete the artifact from the project."""
        self._client._delete(f"{self._project_path(project_id)}/{artifact_id}")  # noqa: SLF001
