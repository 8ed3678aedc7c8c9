"""Portfolio site HTTP client."""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx
from pydantic import ValidationError

from portfolio_cli.client.errors import RequestFailedError, SiteConnectionError
from portfolio_cli.config.constants import DEFAULT_API_BASE, DEFAULT_MAX_RETRIES
from portfolio_cli.config.models import SiteProfile
from portfolio_cli.models.common import ErrorResponse
from portfolio_cli.models.project import Project, ProjectDraft

logger = logging.getLogger(__name__)

PROJECTS_PATH = "/projects"


class PortfolioClient:
    """Synchronous HTTP client for the site's ``/api/projects`` endpoints."""

    def __init__(self, profile: SiteProfile) -> None:
        self.profile = profile
        self.base_url = f"{profile.url}{DEFAULT_API_BASE}"
        if not profile.verify_ssl:
            logger.warning("TLS certificate verification is disabled")
        transport = httpx.HTTPTransport(retries=DEFAULT_MAX_RETRIES)
        self._client = httpx.Client(
            base_url=self.base_url,
            verify=profile.verify_ssl,
            timeout=profile.timeout,
            transport=transport,
            headers={"Accept": "application/json"},
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> PortfolioClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def _handle_response(self, response: httpx.Response) -> httpx.Response:
        if response.is_success:
            return response
        try:
            detail = ErrorResponse.model_validate(response.json()).message
        except (json.JSONDecodeError, UnicodeDecodeError, ValueError):
            detail = response.text
        logger.debug(
            "%s %s failed with %s: %s",
            response.request.method, response.request.url, response.status_code, detail,
        )
        raise RequestFailedError(response.status_code, detail)

    def request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        logger.debug("%s %s%s", method, self.base_url, path)
        try:
            response = self._client.request(method, path, **kwargs)
        except httpx.ConnectError as exc:
            raise SiteConnectionError(
                f"Cannot connect to site at {self.profile.url}: {exc}"
            ) from exc
        except httpx.TimeoutException as exc:
            raise SiteConnectionError(
                f"Request to {self.profile.url} timed out: {exc}"
            ) from exc
        except (httpx.InvalidURL, httpx.UnsupportedProtocol) as exc:
            raise SiteConnectionError(
                f"Invalid URL for site at {self.profile.url}: {exc}"
            ) from exc
        except httpx.TransportError as exc:
            raise SiteConnectionError(
                f"Connection to site at {self.profile.url} failed: {exc!r}"
            ) from exc
        return self._handle_response(response)

    def _decode(self, resp: httpx.Response) -> Any:
        try:
            return resp.json()
        except UnicodeDecodeError:
            # Fallback: decode with replacement for non-UTF8 responses
            text = resp.content.decode("utf-8", errors="replace")
        except json.JSONDecodeError as exc:
            raise RequestFailedError(resp.status_code, f"Invalid JSON in response: {exc}") from exc
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise RequestFailedError(resp.status_code, f"Invalid JSON in response: {exc}") from exc

    def get_json(self, path: str, **kwargs: Any) -> Any:
        return self._decode(self.request("GET", path, **kwargs))

    def _project(self, data: Any) -> Project:
        try:
            return Project.model_validate(data)
        except ValidationError as exc:
            raise RequestFailedError(200, f"Malformed project in response: {exc}") from exc

    # Projects

    def list_projects(self) -> list[Project]:
        """``GET /api/projects``, in server order."""
        data = self.get_json(PROJECTS_PATH)
        if not isinstance(data, list):
            raise RequestFailedError(200, "Expected a list of projects")
        return [self._project(item) for item in data]

    def get_project(self, project_id: str) -> Project:
        return self._project(self.get_json(f"{PROJECTS_PATH}/{project_id}"))

    def create_project(self, draft: ProjectDraft) -> Project:
        resp = self.request("POST", PROJECTS_PATH, json=draft.to_payload())
        return self._project(self._decode(resp))

    def update_project(self, project_id: str, draft: ProjectDraft) -> Project:
        """Send the complete draft; the site replaces every field it carries."""
        resp = self.request(
            "PATCH", f"{PROJECTS_PATH}/{project_id}", json=draft.to_payload(),
        )
        return self._project(self._decode(resp))

    def delete_project(self, project_id: str) -> None:
        self.request("DELETE", f"{PROJECTS_PATH}/{project_id}")
