"""Spira project template resource.

A project template holds the workflow configuration (statuses, types,
priorities) shared by every project created from it.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from spira_client_interface.dto import SpiraDto, api_field

if TYPE_CHECKING:
    from spira_client_impl.spira_impl import SpiraClient


@dataclass(kw_only=True)
class ProjectTemplateDto(SpiraDto):
    """A project template: the workflow configuration shared by its projects."""

    project_template_id: int | None = api_field("ProjectTemplateId")
    name: str | None = api_field("Name")
    description: str | None = api_field("Description")
    is_active: bool | None = api_field("IsActive")


@dataclass(kw_only=True)
class IncidentStatusDto(SpiraDto):
    """One incident status of a template's workflow."""

    incident_status_id: int | None = api_field("IncidentStatusId")
    name: str | None = api_field("Name")
    active: bool | None = api_field("Active")
    #whether incidents in this status count as open
    open: bool | None = api_field("Open")


class ProjectTemplateClient:
    """Project templates, under ``/project-templates``."""

    def __init__(self, client: SpiraClient) -> None:
        self._client = client

    def list(self) -> list[ProjectTemplateDto]:
        """Retrieve all project templates visible to the user."""
        return ProjectTemplateDto.from_json_list(self._client._get("/project-templates"))  # noqa: SLF001

    def get(self, project_template_id: int) -> ProjectTemplateDto:
        """Retrieve a single project template."""
        data = self._client._get(f"/project-templates/{project_template_id}")  # noqa: SLF001
        return ProjectTemplateDto.from_json(data)

    def incident_status_list(self, project_template_id: int) -> list[IncidentStatusDto]:
        """Retrieve the incident statuses defined by the template."""
        data = self._client._get(f"/project-templates/{project_template_id}/incidents/statuses")  # noqa: SLF001
        return IncidentStatusDto.from_json_list(data)
