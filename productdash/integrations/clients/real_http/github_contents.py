"""
GitHub Contents HTTP Client.

Purpose:
- Reads and writes the catalog file through the GitHub repository contents API
- Converts GitHub failures into the error kinds in productdash/integrations/policy/errors.py

Implementation notes:
- Uses httpx for async requests, one short-lived AsyncClient per call
- File content travels base64-encoded; the catalog is pretty-printed JSON
- Every write sends the SHA read earlier in the same request (when the file exists),
  so GitHub rejects blind overwrites with 409/422

Important:
- This client should be the ONLY place that talks to GitHub.
"""

from __future__ import annotations

import base64
import json
import logging
from typing import Any, Dict, List, Optional

import httpx

from productdash.integrations.contracts.interfaces import CatalogSnapshot, CatalogStore
from productdash.integrations.policy.errors import (
    RemoteAuthError,
    RemoteConflict,
    RemoteError,
    RemoteNotFound,
    RemoteRateLimit,
    RemoteStoreError,
)
from productdash.utils.config_loader import StoreConfig

logger = logging.getLogger(__name__)


def encode_catalog(products: List[Dict[str, Any]]) -> str:
    raw = json.dumps(products, indent=2, ensure_ascii=False)
    return base64.b64encode(raw.encode("utf-8")).decode("ascii")


def decode_catalog(content: str) -> List[Dict[str, Any]]:
    # GitHub wraps base64 content at 60 columns; b64decode drops the newlines
    raw = base64.b64decode(content).decode("utf-8")
    data = json.loads(raw) if raw.strip() else []
    if not isinstance(data, list):
        raise RemoteError("Catalog file is not a JSON array", details={"type": type(data).__name__})
    return data


def classify_error(status_code: int, body: Dict[str, Any], headers: Optional[httpx.Headers] = None) -> RemoteStoreError:
    """Map a non-2xx GitHub response onto an error kind."""
    message = str(body.get("message") or f"GitHub API error: {status_code}")
    details = body.get("errors") or message
    rate_limited = status_code == 429 or "rate limit" in message.lower()
    if headers is not None and headers.get("x-ratelimit-remaining") == "0":
        rate_limited = True

    if status_code == 401:
        return RemoteAuthError(details=details, upstream_status=status_code)
    if rate_limited and status_code in (403, 429):
        return RemoteRateLimit(details=details, upstream_status=status_code)
    if status_code == 403:
        return RemoteAuthError(details=details, upstream_status=status_code)
    if status_code == 404:
        return RemoteNotFound(details=details, upstream_status=status_code)
    if status_code in (409, 422):
        return RemoteConflict(details=details, upstream_status=status_code)
    return RemoteError(message, details=details, upstream_status=status_code)


class GitHubContentsClient(CatalogStore):
    def __init__(
        self,
        config: StoreConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.config = config
        self.base_url = config.api_url.rstrip("/")
        self._transport = transport

    def _headers(self) -> Dict[str, str]:
        headers = {
            "User-Agent": self.config.user_agent,
            "Accept": "application/vnd.github.v3+json",
            "Content-Type": "application/json",
        }
        if self.config.token:
            headers["Authorization"] = f"Bearer {self.config.token}"
        return headers

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, str]] = None,
        payload: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        url = f"{self.base_url}{path}"
        logger.info("GitHub %s %s", method, path)
        try:
            async with httpx.AsyncClient(
                timeout=self.config.timeout_seconds,
                transport=self._transport,
            ) as client:
                response = await client.request(method, url, params=params, json=payload, headers=self._headers())
        except httpx.RequestError as e:
            logger.error(f"Request error connecting to GitHub: {e}")
            raise RemoteError("Network error", details=str(e)) from e

        try:
            body = response.json() if response.content else {}
        except ValueError as e:
            raise RemoteError(
                "JSON parse error",
                details=str(e),
                upstream_status=response.status_code,
            ) from e

        if response.is_success:
            logger.info(f"GitHub responded: status={response.status_code}")
            return body

        error = classify_error(response.status_code, body if isinstance(body, dict) else {}, response.headers)
        logger.warning("GitHub %s %s failed: status=%s kind=%s", method, path, response.status_code, type(error).__name__)
        raise error

    async def fetch_catalog(self) -> CatalogSnapshot:
        try:
            file_data = await self._request(
                "GET",
                self.config.contents_path,
                params={"ref": self.config.branch},
            )
        except RemoteNotFound:
            logger.info("Catalog file %s not found on %s, starting empty", self.config.filepath, self.config.branch)
            return CatalogSnapshot(products=[], sha=None)

        if not isinstance(file_data, dict):
            raise RemoteError("Catalog path is not a file", details=self.config.filepath)

        sha = file_data.get("sha")
        # files over 1 MB come back with encoding "none" and no content
        if file_data.get("encoding") == "none":
            raise RemoteError(
                "Catalog file too large for the GitHub contents API",
                details={"size": file_data.get("size"), "path": self.config.filepath},
            )

        content = file_data.get("content")
        if not content:
            return CatalogSnapshot(products=[], sha=sha)

        try:
            products = decode_catalog(content)
        except (ValueError, UnicodeDecodeError) as e:
            raise RemoteError("JSON parse error", details=str(e)) from e
        return CatalogSnapshot(products=products, sha=sha)

    async def write_catalog(
        self,
        products: List[Dict[str, Any]],
        message: str,
        sha: Optional[str] = None,
    ) -> Optional[str]:
        payload: Dict[str, Any] = {
            "message": message,
            "content": encode_catalog(products),
            "branch": self.config.branch,
        }
        if sha:
            payload["sha"] = sha

        data = await self._request("PUT", self.config.contents_path, payload=payload)
        logger.info("Committed catalog (%d products): %s", len(products), message)
        return (data.get("content") or {}).get("sha")
