"""Spira project resource."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from spira_client_interface.dto import SpiraDto, api_field

if TYPE_CHECKING:
    from spira_client_impl.spira_impl import SpiraClient


@dataclass(kw_only=True)
class ProjectDto(SpiraDto):
    """A Spira project (product)."""

    name: str | None = api_field("Name")
    project_id: int | None = api_field("ProjectId")
    description: str | None = api_field("Description")
    website: str | None = api_field("Website")
    creation_date: str | None = api_field("CreationDate")
    active: bool | None = api_field("Active")
    project_template_id: int | None = api_field("ProjectTemplateId")


class ProjectClient:
    """Projects the authenticated user is a member of."""

    def __init__(self, client: SpiraClient) -> None:
        self._client = client

    def list(self) -> list[ProjectDto]:
        """GET /projects"""
        return ProjectDto.from_json_list(self._client._get("/projects"))  # noqa: SLF001

    def get(self, project_id: int) -> ProjectDto:
        """GET /projects/{project_id}"""
        return ProjectDto.from_json(self._client._get(f"/projects/{project_id}"))  # noqa: SLF001
