"""CKAN action API client handle and request dispatcher."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import httpx
from httpx import AsyncClient, Response

from ckanaction import config
from ckanaction.body import encode_json, flatten_form
from ckanaction.errors import ResponseDecodeError, TransportError, UploadError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CKAN:
    """Immutable handle on one CKAN site's action API.

    Calls go to ``{url}/api/3/action/{action}``. When ``token`` is set it is
    sent verbatim as the ``Authorization`` header on every request. Pass an
    ``http`` client to reuse connections (or to route through a test
    transport); otherwise each call opens its own short-lived client.

    Responses are returned as decoded JSON without looking at the HTTP status
    or CKAN's ``success`` flag.
    """

    url: str
    token: str | None = field(default=None, repr=False)
    timeout: float = config.CKAN_TIMEOUT
    http: AsyncClient | None = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "url", self.url.rstrip("/"))

    @classmethod
    def from_env(cls) -> "CKAN":
        """Build a client from the CKANACTION_* environment settings."""
        return cls(url=config.CKAN_URL, token=config.CKAN_TOKEN, timeout=config.CKAN_TIMEOUT)

    def endpoint(self, action: str) -> str:
        return f"{self.url}{config.API_PATH}{action}"

    def headers(self) -> dict[str, str]:
        if self.token is None:
            return {}
        return {"Authorization": self.token}

    async def get(self, action: str) -> Any:
        """Call a parameterless action with a bodiless GET."""
        resp = await self._send("GET", action)
        return self._decode(action, resp)

    async def post(
        self,
        action: str,
        body: dict[str, Any] | None = None,
        upload: str | os.PathLike | None = None,
    ) -> Any:
        """POST ``body`` to an action.

        Without ``upload`` the body goes out as ``application/json``. With it,
        the request becomes ``multipart/form-data``: each body entry is a text
        field and the file is streamed as the ``upload`` part.
        """
        if body is None:
            body = {}
        if upload is None:
            resp = await self._send(
                "POST",
                action,
                content=encode_json(body),
                headers={"Content-Type": "application/json"},
            )
            return self._decode(action, resp)

        path = Path(upload)
        data = flatten_form(body)
        try:
            fh = path.open("rb")
        except OSError as e:
            logger.error("Cannot open upload file %s for %s: %s", path, action, e)
            raise UploadError(f"Cannot open upload file {path}: {e}") from e
        with fh:
            try:
                resp = await self._send(
                    "POST", action, data=data, files={"upload": (path.name, fh)}
                )
            except OSError as e:
                logger.error("Cannot read upload file %s for %s: %s", path, action, e)
                raise UploadError(f"Cannot read upload file {path}: {e}") from e
        return self._decode(action, resp)

    async def _send(
        self,
        method: str,
        action: str,
        headers: dict[str, str] | None = None,
        **kwargs,
    ) -> Response:
        url = self.endpoint(action)
        request_headers = {**self.headers(), **(headers or {})}
        logger.debug("%s %s", method, url)
        try:
            if self.http is not None:
                resp = await self.http.request(method, url, headers=request_headers, **kwargs)
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    resp = await client.request(method, url, headers=request_headers, **kwargs)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error("CKAN request %s %s failed: %s", method, url, e)
            raise TransportError(f"{method} {url} failed: {e}") from e
        logger.debug("%s %s -> %d", method, url, resp.status_code)
        return resp

    def _decode(self, action: str, resp: Response) -> Any:
        try:
            return resp.json()
        except ValueError as e:
            excerpt = resp.content[:200].decode("utf-8", errors="replace")
            logger.warning(
                "Undecodable response from %s (HTTP %d): %r", action, resp.status_code, excerpt
            )
            raise ResponseDecodeError(
                f"Response from {action} is not valid JSON: {e}",
                status_code=resp.status_code,
                body=excerpt,
            ) from e
