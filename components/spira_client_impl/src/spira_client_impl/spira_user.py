"""Spira user resource."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING
from urllib.parse import quote

from spira_client_interface.dto import SpiraDto, api_field

if TYPE_CHECKING:
    from spira_client_impl.spira_impl import SpiraClient


@dataclass(kw_only=True)
class UserDto(SpiraDto):
    """A Spira user account."""

    user_id: int | None = api_field("UserId")
    first_name: str | None = api_field("FirstName")
    middle_initial: str | None = api_field("MiddleInitial")
    last_name: str | None = api_field("LastName")
    user_name: str | None = api_field("UserName")
    email_address: str | None = api_field("EmailAddress")
    department: str | None = api_field("Department")
    admin: bool | None = api_field("Admin")
    active: bool | None = api_field("Active")
    approved: bool | None = api_field("Approved")
    locked: bool | None = api_field("Locked")

    @property
    def full_name(self) -> str:
        """Return 'First M. Last', skipping the parts that are not set."""
        middle = f"{self.middle_initial}." if self.middle_initial else None
        return " ".join(part for part in (self.first_name, middle, self.last_name) if part)


class UserClient:
    """User accounts, looked up by id, login name or project membership."""

    def __init__(self, client: SpiraClient) -> None:
        self._client = client

    def get(self, user_id: int) -> UserDto:
        """Retrieve a user by id."""
        return UserDto.from_json(self._client._get(f"/users/{user_id}"))  # noqa: SLF001

    def get_by_username(self, username: str) -> UserDto:
        """Retrieve a user by login name."""
        data = self._client._get(f"/users/usernames/{quote(username, safe='')}")  # noqa: SLF001
        return UserDto.from_json(data)

    def list_by_project(self, project_id: int) -> list[UserDto]:
        """Retrieve the members of a project."""
        return UserDto.from_json_list(self._client._get(f"/projects/{project_id}/users"))  # noqa: SLF001
