"""Spira task resource."""
from __future__ import annotations

from dataclasses import dataclass

from spira_client_impl.spira_artifact import SpiraArtifactClient
from spira_client_interface.dto import SpiraDto, api_field


@dataclass(kw_only=True)
class TaskDto(SpiraDto):
    """A Spira task.

    Dates are ISO-8601 strings exactly as the server sends them
    (e.g. '2022-03-14T11:28:07.240Z'). Efforts are in minutes.
    """

    task_id: int | None = api_field("TaskId")
    task_status_id: int | None = api_field("TaskStatusId")
    task_type_id: int | None = api_field("TaskTypeId")
    #None for the root folder
    task_folder_id: int | None = api_field("TaskFolderId")
    #parent requirement
    requirement_id: int | None = api_field("RequirementId")
    release_id: int | None = api_field("ReleaseId")
    #defaults to the authenticated user on insert
    creator_id: int | None = api_field("CreatorId")
    owner_id: int | None = api_field("OwnerId")
    task_priority_id: int | None = api_field("TaskPriorityId")
    name: str | None = api_field("Name")
    description: str | None = api_field("Description")
    creation_date: str | None = api_field("CreationDate")
    #must match the value last read for an update to be accepted
    last_update_date: str | None = api_field("LastUpdateDate")
    start_date: str | None = api_field("StartDate")
    end_date: str | None = api_field("EndDate")
    estimated_effort: int | None = api_field("EstimatedEffort")
    actual_effort: int | None = api_field("ActualEffort")
    remaining_effort: int | None = api_field("RemainingEffort")
    #the project in the URL always wins on insert
    project_id: int = api_field("ProjectId", required=True)
    concurrency_date: str | None = api_field("ConcurrencyDate")


class TaskClient(SpiraArtifactClient[TaskDto]):
    """Tasks, under ``/tasks`` and ``/projects/{project_id}/tasks``."""

    collection = "tasks"
    dto = TaskDto
