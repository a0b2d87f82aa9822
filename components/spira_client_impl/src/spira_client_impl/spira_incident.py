"""Spira incident resource."""
from __future__ import annotations

from dataclasses import dataclass

from spira_client_impl.spira_artifact import SpiraArtifactClient
from spira_client_interface.dto import SpiraDto, api_field


@dataclass(kw_only=True)
class IncidentDto(SpiraDto):
    """A Spira incident (bug, issue, risk...)."""

    incident_id: int | None = api_field("IncidentId")
    priority_id: int | None = api_field("PriorityId")
    severity_id: int | None = api_field("SeverityId")
    #workflow default when omitted
    incident_status_id: int | None = api_field("IncidentStatusId")
    #project default when omitted
    incident_type_id: int | None = api_field("IncidentTypeId")
    #the authenticated user when omitted
    opener_id: int | None = api_field("OpenerId")
    owner_id: int | None = api_field("OwnerId")
    test_run_step_ids: list[int] | None = api_field("TestRunStepIds")
    detected_release_id: int | None = api_field("DetectedReleaseId")
    resolved_release_id: int | None = api_field("ResolvedReleaseId")
    verified_release_id: int | None = api_field("VerifiedReleaseId")
    component_ids: list[int] | None = api_field("ComponentIds")
    name: str = api_field("Name", required=True)
    description: str | None = api_field("Description")
    #server time when omitted
    creation_date: str | None = api_field("CreationDate")
    start_date: str | None = api_field("StartDate")
    end_date: str | None = api_field("EndDate")
    closed_date: str | None = api_field("ClosedDate")
    estimated_effort: int | None = api_field("EstimatedEffort")
    actual_effort: int | None = api_field("ActualEffort")
    remaining_effort: int | None = api_field("RemainingEffort")
    last_update_date: str | None = api_field("LastUpdateDate")
    fixed_build_id: int | None = api_field("FixedBuildId")
    detected_build_id: int | None = api_field("DetectedBuildId")
    project_id: int = api_field("ProjectId", required=True)
    concurrency_date: str | None = api_field("ConcurrencyDate")
    is_attachments: bool | None = api_field("IsAttachments")


class IncidentClient(SpiraArtifactClient[IncidentDto]):
    """Incidents, under ``/incidents`` and ``/projects/{project_id}/incidents``.

    Unlike tasks and requirements, an incident update is addressed to the
    incident's own URL.
    """

    collection = "incidents"
    dto = IncidentDto

    def _update_path(self, project_id: int, artifact: IncidentDto) -> str:
        if artifact.incident_id is None:
            raise ValueError("Cannot update an incident without an incident_id")
        return f"{self._project_path(project_id)}/{artifact.incident_id}"
