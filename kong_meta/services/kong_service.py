import httpx
import logging
from typing import Dict, List, Optional

from pydantic import ValidationError

from kong_meta.models.meta_models import Workspace, WorkspaceList, WorkspaceMeta

logger = logging.getLogger(__name__)

USER_AGENT = "kong-meta/0.1.0"


class KongAdminError(Exception):
    """A Kong admin API request failed or returned an unusable body"""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"GET {url}: {reason}")


class KongAdminService:
    def __init__(
        self,
        base_url: str,
        headers: Optional[Dict[str, str]] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.headers = dict(headers or {})
        self._transport = transport
        self._client: Optional[httpx.Client] = None

    @property
    def client(self) -> httpx.Client:
        """Get the HTTP client, created on first use"""
        if self._client is None:
            self._client = httpx.Client(
                headers={"User-Agent": USER_AGENT},
                transport=self._transport,
            )
        return self._client

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self):
        if self._client:
            self._client.close()
            self._client = None

    def _get_json(self, url: str, headers: Optional[Dict[str, str]] = None):
        try:
            response = self.client.get(url, headers=headers)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            raise KongAdminError(url, f"HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise KongAdminError(url, str(e) or type(e).__name__) from e
        except ValueError as e:
            raise KongAdminError(url, f"invalid JSON: {e}") from e

    def list_workspaces(self) -> List[Workspace]:
        url = f"{self.base_url}/workspaces"
        body = self._get_json(url)

        try:
            workspaces = WorkspaceList.model_validate(body).data
        except ValidationError as e:
            raise KongAdminError(url, f"unexpected workspace list: {e.error_count()} error(s)") from e

        logger.debug(f"Found {len(workspaces)} workspaces at {self.base_url}")
        return workspaces

    def get_workspace_meta(self, workspace_name: str) -> WorkspaceMeta:
        url = f"{self.base_url}/workspaces/{workspace_name}/meta"
        body = self._get_json(url, headers=self.headers)

        try:
            return WorkspaceMeta.model_validate(body)
        except ValidationError as e:
            raise KongAdminError(url, f"unexpected metadata: {e.error_count()} error(s)") from e
