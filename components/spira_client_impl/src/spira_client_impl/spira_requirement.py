"""Spira requirement resource."""
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any

from spira_client_impl.spira_artifact import SpiraArtifactClient
from spira_client_interface.dto import SpiraDto, api_field

# ---------------------------------------------------------------------------
# Well-known ids of the default project template
# ---------------------------------------------------------------------------

class RequirementStatus(IntEnum):
    REQUESTED = 1
    PLANNED = 2
    IN_PROGRESS = 3
    DEVELOPED = 4
    ACCEPTED = 5
    REJECTED = 6
    EVALUATED = 7
    OBSOLETE = 8
    TESTED = 9
    COMPLETED = 10


class RequirementType(IntEnum):
    PACKAGE = -1
    NEED = 1
    FEATURE = 2
    USE_CASE = 3
    USER_STORY = 4
    QUALITY = 5
    DESIGN_ELEMENT = 6


class RequirementImportance(IntEnum):
    CRITICAL = 1
    HIGH = 2
    MEDIUM = 3
    LOW = 4


@dataclass(kw_only=True)
class RequirementDto(SpiraDto):
    """A Spira requirement.

    ``indent_level`` is Spira's hierarchy path made of three-letter segments
    (AAA, then AAB, ...). ``steps`` is only populated for use-case requirements.
    """

    requirement_id: int | None = api_field("RequirementId")
    indent_level: str | None = api_field("IndentLevel")
    #RequirementStatus; default status when omitted
    status_id: int | None = api_field("StatusId")
    #RequirementType; default type when omitted
    requirement_type_id: int | None = api_field("RequirementTypeId")
    #the authenticated user when omitted
    author_id: int | None = api_field("AuthorId")
    owner_id: int | None = api_field("OwnerId")
    importance_id: int | None = api_field("ImportanceId")
    release_id: int | None = api_field("ReleaseId")
    component_id: int | None = api_field("ComponentId")
    name: str = api_field("Name", required=True)
    description: str | None = api_field("Description")
    creation_date: str | None = api_field("CreationDate")
    last_update_date: str | None = api_field("LastUpdateDate")
    summary: bool | None = api_field("Summary")
    #story points
    estimate_points: float | None = api_field("EstimatePoints")
    steps: list[Any] | None = api_field("Steps")
    start_date: str | None = api_field("StartDate")
    end_date: str | None = api_field("EndDate")
    estimated_effort: int | None = api_field("EstimatedEffort")
    percent_complete: float | None = api_field("PercentComplete")
    theme_id: int | None = api_field("ThemeId")
    goal_id: int | None = api_field("GoalId")
    project_id: int = api_field("ProjectId", required=True)
    concurrency_date: str | None = api_field("ConcurrencyDate")
    is_attachments: bool | None = api_field("IsAttachments")


class RequirementClient(SpiraArtifactClient[RequirementDto]):
    """Requirements, under ``/requirements`` and ``/projects/{project_id}/requirements``.

    New requirements are appended at the end of the list visible to the user,
    at the same indent level as the last one.
    """

    collection = "requirements"
    dto = RequirementDto
