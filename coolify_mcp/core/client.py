"""Async HTTP client for the Coolify REST API.

Every method is a single request against `<base_url>/api/v1`, with no retries
and no caching. Failures are normalized into `CoolifyApiError` (the server
answered with a non-2xx status) or `CoolifyNetworkError` (no answer at all).
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import httpx
from pydantic import BaseModel, StrictStr, ValidationError

from coolify_mcp.core.config import Settings
from coolify_mcp.core.errors import CoolifyApiError, CoolifyNetworkError
from coolify_mcp.utils.response_utils import parse_body

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"
HEALTH_PATH = "/api/health"


class ApiErrorBody(BaseModel):
    """Error body Coolify returns for validation and business errors."""

    message: StrictStr
    errors: Optional[Dict[StrictStr, List[StrictStr]]] = None


def _api_error(response: httpx.Response) -> CoolifyApiError:
    body = parse_body(response)
    try:
        error = ApiErrorBody.model_validate(body)
    except ValidationError:
        message = body.get("message") if isinstance(body, dict) else None
        return CoolifyApiError(
            f"API Error {response.status_code}: {message or response.reason_phrase}",
            status_code=response.status_code,
        )
    return CoolifyApiError(
        f"Coolify API Error: {error.message}",
        status_code=response.status_code,
        errors=error.errors,
    )


def _network_error(exc: httpx.RequestError) -> CoolifyNetworkError:
    # httpx timeouts often carry an empty message
    detail = str(exc) or type(exc).__name__
    return CoolifyNetworkError(f"Network Error: {detail}")


class CoolifyClient:
    """Thin binding of the Coolify v1 endpoints.

    Use as an async context manager, or call `aclose()` when done. `transport`
    is handed to httpx and lets tests plug in an `httpx.MockTransport`.
    """

    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.settings = settings
        self._http = httpx.AsyncClient(
            base_url=f"{settings.base_url}{API_PREFIX}",
            timeout=settings.timeout_seconds,
            headers={
                "Authorization": f"Bearer {settings.api_token}",
                "Content-Type": "application/json",
                "Accept": "application/json",
            },
            transport=transport,
        )

    async def __aenter__(self) -> "CoolifyClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def _request(self, method: str, endpoint: str, *, params: Optional[Dict[str, Any]] = None,
                       json: Any = None) -> Any:
        logger.debug("%s %s%s", method, API_PREFIX, endpoint)
        try:
            response = await self._http.request(method, endpoint.lstrip("/"), params=params, json=json)
        except httpx.RequestError as exc:
            raise _network_error(exc) from exc
        if response.is_error:
            raise _api_error(response)
        return parse_body(response)

    ##################################### generic verbs #####################################

    async def get(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return await self._request("GET", endpoint, params=params)

    async def post(self, endpoint: str, data: Any = None) -> Any:
        return await self._request("POST", endpoint, json=data)

    async def patch(self, endpoint: str, data: Any = None) -> Any:
        return await self._request("PATCH", endpoint, json=data)

    async def delete(self, endpoint: str) -> Any:
        return await self._request("DELETE", endpoint)

    ##################################### system #####################################

    async def health_check(self) -> Any:
        """Query `<base_url>/api/health`, which lives outside the /api/v1 prefix."""
        url = f"{self.settings.base_url}{HEALTH_PATH}"
        try:
            response = await self._http.get(url)
        except httpx.RequestError as exc:
            raise CoolifyNetworkError(f"Health check failed: {_network_error(exc)}") from exc
        if response.is_error:
            error = _api_error(response)
            raise CoolifyApiError(f"Health check failed: {error}", status_code=error.status_code)
        return parse_body(response)

    async def get_version(self) -> Any:
        return await self.get("/version")

    ##################################### teams #####################################

    async def list_teams(self) -> Any:
        return await self.get("/teams")

    async def get_team(self, team_id: str) -> Any:
        return await self.get(f"/teams/{team_id}")

    async def get_current_team(self) -> Any:
        return await self.get("/teams/current")

    async def get_current_team_members(self) -> Any:
        return await self.get("/teams/current/members")

    ##################################### servers #####################################

    async def list_servers(self) -> Any:
        return await self.get("/servers")

    async def create_server(self, server_data: Dict[str, Any]) -> Any:
        return await self.post("/servers", server_data)

    async def validate_server(self, uuid: str) -> Any:
        return await self.post(f"/servers/{uuid}/validate")

    async def get_server_resources(self, uuid: str) -> Any:
        return await self.get(f"/servers/{uuid}/resources")

    async def get_server_domains(self, uuid: str) -> Any:
        return await self.get(f"/servers/{uuid}/domains")

    ##################################### applications #####################################

    async def list_applications(self) -> Any:
        return await self.get("/applications")

    async def create_application(self, application_data: Dict[str, Any]) -> Any:
        return await self.post("/applications", application_data)

    async def start_application(self, uuid: str) -> Any:
        return await self.post(f"/applications/{uuid}/start")

    async def stop_application(self, uuid: str) -> Any:
        return await self.post(f"/applications/{uuid}/stop")

    async def restart_application(self, uuid: str) -> Any:
        return await self.post(f"/applications/{uuid}/restart")

    async def execute_command_application(self, uuid: str, command: str) -> Any:
        return await self.post(f"/applications/{uuid}/execute", {"command": command})

    ##################################### services #####################################

    async def list_services(self) -> Any:
        return await self.get("/services")

    async def create_service(self, service_data: Dict[str, Any]) -> Any:
        return await self.post("/services", service_data)

    async def start_service(self, uuid: str) -> Any:
        return await self.post(f"/services/{uuid}/start")

    async def stop_service(self, uuid: str) -> Any:
        return await self.post(f"/services/{uuid}/stop")

    async def restart_service(self, uuid: str) -> Any:
        return await self.post(f"/services/{uuid}/restart")

    ##################################### deployments #####################################

    async def list_deployments(self) -> Any:
        return await self.get("/deployments")

    async def get_deployment(self, uuid: str) -> Any:
        return await self.get(f"/deployments/{uuid}")

    async def list_application_deployments(self, uuid: str, skip: int = 0, take: int = 10) -> Any:
        return await self.get(f"/deployments/applications/{uuid}", {"skip": skip, "take": take})

    ##################################### private keys #####################################

    async def list_private_keys(self) -> Any:
        return await self.get("/private-keys")

    async def create_private_key(self, key_data: Dict[str, Any]) -> Any:
        return await self.post("/private-keys", key_data)

    ##################################### application envs #####################################

    async def list_application_envs(self, uuid: str) -> Any:
        return await self.get(f"/applications/{uuid}/envs")

    async def create_application_env(self, uuid: str, env_data: Dict[str, Any]) -> Any:
        return await self.post(f"/applications/{uuid}/envs", env_data)

    async def update_application_env(self, uuid: str, env_data: Dict[str, Any]) -> Any:
        """Update one variable, matched by key. The env's own uuid is not part of the body."""
        update_data = {k: v for k, v in env_data.items() if k != "uuid"}
        return await self.patch(f"/applications/{uuid}/envs", update_data)

    async def bulk_update_application_envs(self, uuid: str, envs: List[Dict[str, Any]]) -> Any:
        return await self.patch(f"/applications/{uuid}/envs/bulk", {"data": envs})

    async def delete_application_env(self, application_uuid: str, env_uuid: str) -> Any:
        return await self.delete(f"/applications/{application_uuid}/envs/{env_uuid}")

    ##################################### service envs #####################################

    async def list_service_envs(self, uuid: str) -> Any:
        return await self.get(f"/services/{uuid}/envs")

    async def create_service_env(self, uuid: str, env_data: Dict[str, Any]) -> Any:
        return await self.post(f"/services/{uuid}/envs", env_data)

    async def update_service_env(self, uuid: str, env_data: Dict[str, Any]) -> Any:
        return await self.patch(f"/services/{uuid}/envs", env_data)

    async def bulk_update_service_envs(self, uuid: str, envs: List[Dict[str, Any]]) -> Any:
        return await self.patch(f"/services/{uuid}/envs/bulk", {"data": envs})

    async def delete_service_env(self, service_uuid: str, env_uuid: str) -> Any:
        return await self.delete(f"/services/{service_uuid}/envs/{env_uuid}")
