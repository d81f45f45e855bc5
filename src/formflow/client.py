"""
Flow platform API client.

Hands compiled flow documents to the flow management platform: create a
flow record, upload the compiled JSON as its asset, inspect and delete
flows. The compiler never calls this module; it only produces the
document uploaded here.
"""
import json
from typing import Any, Dict, List, Optional, Union

import httpx
import structlog

from formflow.config import PlatformSettings, get_settings
from formflow.serialization import flow_to_json

logger = structlog.get_logger(__name__)

FLOW_FIELDS = (
    "id,name,categories,preview,status,validation_errors,json_version,"
    "data_api_version,data_channel_uri,whatsapp_business_account,application"
)
DEFAULT_CATEGORIES = ["OTHER"]
FLOW_ASSET_NAME = "flow.json"
FLOW_ASSET_TYPE = "FLOW_JSON"


class FlowPlatformError(Exception):
    """Raised when the platform rejects a request or cannot be reached"""

    def __init__(self, message: str, status_code: Optional[int] = None, payload: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.payload = payload


def _error_message(response: httpx.Response) -> tuple:
    try:
        payload = response.json()
    except ValueError:
        return response.text or response.reason_phrase, None
    if isinstance(payload, dict) and isinstance(payload.get("error"), dict):
        return payload["error"].get("message", response.reason_phrase), payload
    return response.reason_phrase, payload


class FlowPlatformClient:
    """
    Client for the flow management endpoints of the platform API.

    Usable as a context manager; pass `transport` to route requests
    somewhere other than the network (tests use httpx.MockTransport).
    """

    def __init__(
        self,
        settings: Optional[PlatformSettings] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.settings = settings or get_settings()
        headers = {}
        if self.settings.access_token:
            headers["Authorization"] = f"Bearer {self.settings.access_token}"
        self._client = httpx.Client(
            base_url=self.settings.api_root,
            headers=headers,
            timeout=self.settings.timeout,
            transport=transport,
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "FlowPlatformClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @property
    def business_account_id(self) -> str:
        if not self.settings.business_account_id:
            raise FlowPlatformError("FORMFLOW_BUSINESS_ACCOUNT_ID is not configured")
        return self.settings.business_account_id

    def _request(self, method: str, path: str, **kwargs) -> Any:
        log = logger.bind(method=method, path=path)
        try:
            response = self._client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            log.error("flow_platform_unreachable", error=str(e))
            raise FlowPlatformError(f"Request to {path} failed: {e}") from e

        log.info("flow_platform_request", status=response.status_code)
        if response.is_error:
            message, payload = _error_message(response)
            log.warning("flow_platform_error", status=response.status_code, message=message)
            raise FlowPlatformError(message, status_code=response.status_code, payload=payload)

        if not response.content:
            return {}
        return response.json()

    def create_flow(self, name: str, categories: Optional[List[str]] = None) -> Dict[str, Any]:
        """Create an empty flow record; returns the platform's response (with the new id)."""
        data = {
            "name": name,
            "categories": json.dumps(categories or DEFAULT_CATEGORIES),
        }
        return self._request("POST", f"{self.business_account_id}/flows", data=data)

    def list_flows(self) -> Dict[str, Any]:
        return self._request("GET", f"{self.business_account_id}/flows")

    def get_flow(self, flow_id: str) -> Dict[str, Any]:
        return self._request("GET", flow_id, params={"fields": FLOW_FIELDS})

    def get_flow_preview(self, flow_id: str) -> Dict[str, Any]:
        return self._request("GET", flow_id, params={"fields": "preview"})

    def upload_flow_json(self, flow_id: str, document: Union[Dict[str, Any], bytes]) -> Dict[str, Any]:
        """
        Upload a compiled flow document as the flow's JSON asset.

        Args:
            flow_id: Existing flow to attach the asset to
            document: Compiled document dict, or already encoded JSON bytes
        """
        if isinstance(document, dict):
            content = flow_to_json(document).encode("utf-8")
        else:
            content = document
        files = {"file": (FLOW_ASSET_NAME, content, "application/json")}
        data = {"name": FLOW_ASSET_NAME, "asset_type": FLOW_ASSET_TYPE}
        return self._request("POST", f"{flow_id}/assets", data=data, files=files)

    def delete_flow(self, flow_id: str) -> Dict[str, Any]:
        return self._request("DELETE", flow_id)
