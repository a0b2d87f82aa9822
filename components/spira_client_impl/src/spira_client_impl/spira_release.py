"""Spira release resource."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from spira_client_interface.dto import SpiraDto, api_field

if TYPE_CHECKING:
    from spira_client_impl.spira_impl import SpiraClient


@dataclass(kw_only=True)
class ReleaseDto(SpiraDto):
    """A release or iteration of a project."""

    release_id: int | None = api_field("ReleaseId")
    #version number followed by the name, e.g. '1.0.0.0 - Library System Release 1'
    full_name: str | None = api_field("FullName")
    name: str | None = api_field("Name")
    version_number: str | None = api_field("VersionNumber")
    start_date: str | None = api_field("StartDate")
    end_date: str | None = api_field("EndDate")
    active: bool | None = api_field("Active")
    project_id: int | None = api_field("ProjectId")


class ReleaseClient:
    """Releases, always scoped to a project."""

    def __init__(self, client: SpiraClient) -> None:
        self._client = client

    def list(self, project_id: int) -> list[ReleaseDto]:
        """Retrieve all the releases belonging to the project."""
        data = self._client._get(f"/projects/{project_id}/releases")  # noqa: SLF001
        return ReleaseDto.from_json_list(data)

    def get(self, project_id: int, release_id: int) -> ReleaseDto:
        """Retrieve a single release of the project."""
        data = self._client._get(f"/projects/{project_id}/releases/{release_id}")  # noqa: SLF001
        return ReleaseDto.from_json(data)
