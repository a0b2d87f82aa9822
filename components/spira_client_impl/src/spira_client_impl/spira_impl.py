"""
Authentication
--------------
Spira authenticates every REST call with two static headers, ``username`` and
``api-key`` (the RSS token shown on the user's profile page). The client
supports two credential modes:

1. When get_client(interactive = True)
    User is prompted for the values below at runtime if any are missing from the environment.
2. When get_client(interactive = False) - Default
        SPIRA_API_URL   https://myorg.spiraservice.net/Services/v6_0/RestService.svc
        SPIRA_USERNAME  fredbloggs
        SPIRA_API_KEY   {XXXXXXXX-XXXX-XXXX-XXXX-XXXXXXXXXXXX}

Dependencies:
    uv add requests

"""
#to avoid having to consider forward declarations, the below line must be first line in the file
from __future__ import annotations

import logging
import os
from getpass import getpass
from typing import Any

import requests

from spira_client_interface.client import ArtifactNotFoundError as BaseArtifactNotFoundError
from spira_client_impl.spira_incident import IncidentClient
from spira_client_impl.spira_project import ProjectClient
from spira_client_impl.spira_project_template import ProjectTemplateClient
from spira_client_impl.spira_release import ReleaseClient
from spira_client_impl.spira_requirement import RequirementClient
from spira_client_impl.spira_task import TaskClient
from spira_client_impl.spira_user import UserClient

logger = logging.getLogger(__name__)

DEFAULT_CONNECT_TIMEOUT = 10.0


class SpiraError(Exception):
    """Raised when the Spira API returns an unexpected response."""

    def __init__(self, message: str, *, status_code: int | None = None, detail: Any = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail


class SpiraAuthError(SpiraError):
    """Raised when Spira rejects the username / api-key pair."""


class ArtifactNotFoundError(BaseArtifactNotFoundError):
    """Raised when a requested Spira resource does not exist."""


# ---------------------------------------------------------------------------
# Client implementation
# ---------------------------------------------------------------------------

class SpiraClient:
    """
    Args:
        base_url:        Spira REST service root (e.g. 'https://myorg.spiraservice.net/Services/v6_0/RestService.svc')
        username:        Spira login name
        api_key:         API key (RSS token) of that user
        connect_timeout: Seconds to wait for a connection; reads are not bounded

    The resource clients hang off the instance and all share one session:

        client.task, client.project, client.requirement, client.incident,
        client.release, client.project_template, client.user
    """

    def __init__(
        self,
        base_url: str,
        username: str,
        api_key: str,
        *,
        connect_timeout: float = DEFAULT_CONNECT_TIMEOUT,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = (connect_timeout, None)
        self._session = requests.Session()
        self._session.headers.update({
            "Accept": "application/json",
            "Content-Type": "application/json",
            "api-key": api_key,
            "username": username,
        })

        self.task = TaskClient(self)
        self.project = ProjectClient(self)
        self.requirement = RequirementClient(self)
        self.incident = IncidentClient(self)
        self.release = ReleaseClient(self)
        self.project_template = ProjectTemplateClient(self)
        self.user = UserClient(self)

    @property
    def base_url(self) -> str:
        """Return the REST service root the client talks to."""
        return self._base_url

    def close(self) -> None:
        """Release the pooled connections held by the session."""
        self._session.close()

    def __enter__(self) -> SpiraClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Internal HTTP helpers
    # ------------------------------------------------------------------

    def _url(self, path: str) -> str:
        return f"{self._base_url}{path}"

    def _request(self, method: str, path: str, body: dict | None = None) -> requests.Response:
        url = self._url(path)
        logger.debug("%s %s", method, url)
        try:
            response = self._session.request(method, url, json=body, timeout=self._timeout)
        except requests.RequestException as exc:
            raise SpiraError(f"Request to {url} failed: {exc}") from exc
        self._raise_for_status(response)
        return response

    def _get(self, path: str) -> Any:
        return self._decode(self._request("GET", path))

    def _post(self, path: str, body: dict) -> Any:
        return self._decode(self._request("POST", path, body))

    def _put(self, path: str, body: dict) -> Any:
        response = self._request("PUT", path, body)
        # Spira answers most updates with an empty body
        if response.status_code == 204 or not response.content:
            return {}
        return self._decode(response)

    def _delete(self, path: str) -> None:
        self._request("DELETE", path)

    @staticmethod
    def _decode(response: requests.Response) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            raise SpiraError(
                f"Spira returned a non-JSON body for {response.url}",
                status_code=response.status_code,
                detail=response.text,
            ) from exc

    @staticmethod
    def _raise_for_status(response: requests.Response) -> None:
        if response.status_code == 404:
            logger.warning("Spira resource not found: %s", response.url)
            raise ArtifactNotFoundError(f"Resource not found: {response.url}")
        if response.ok:
            return
        try:
            detail = response.json()
        except ValueError:
            detail = response.text
        logger.warning("Spira API error %s for %s", response.status_code, response.url)
        if response.status_code in (401, 403):
            raise SpiraAuthError(
                f"Spira rejected the credentials ({response.status_code}): {detail}",
                status_code=response.status_code,
                detail=detail,
            )
        raise SpiraError(
            f"Spira API error {response.status_code}: {detail}",
            status_code=response.status_code,
            detail=detail,
        )


# ---------------------------------------------------------------------------
# Get client
# ---------------------------------------------------------------------------

def get_client(*, interactive: bool = False) -> SpiraClient:
    """Return a configured SpiraClient.

    Reads credentials from environment variables. If "interactive = True" and
    any variable is missing, the user will be prompted.

    Environment variables:
        SPIRA_API_URL:   Root URL of the Spira REST service.
        SPIRA_USERNAME:  Spira login name.
        SPIRA_API_KEY:   API key (RSS token) of that user.
    """
    base_url = os.environ.get("SPIRA_API_URL", "")
    username = os.environ.get("SPIRA_USERNAME", "")
    api_key = os.environ.get("SPIRA_API_KEY", "")

    if interactive:
        if not base_url:
            base_url = input("Spira REST URL (e.g. https://myorg.spiraservice.net/Services/v6_0/RestService.svc): ").strip()
        if not username:
            username = input("Spira username: ").strip()
        if not api_key:
            api_key = getpass("Spira API key: ")
    else:
        #collects the missing fields and raises an error alerting to the missing values
        missing = [name for name, val in [
            ("SPIRA_API_URL", base_url),
            ("SPIRA_USERNAME", username),
            ("SPIRA_API_KEY", api_key),
        ] if not val]
        if missing:
            raise EnvironmentError(
                f"Missing required environment variables: {', '.join(missing)}. "
                "Set them or call get_client(interactive=True)."
            )

    return SpiraClient(base_url, username, api_key)
