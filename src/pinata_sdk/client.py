"""Pinata API client - one async method per REST endpoint."""

from __future__ import annotations

import logging
from typing import Any, Callable, TypeVar

import httpx

from pinata_sdk.errors import (
    ApiError,
    DecodeError,
    InvalidApiKeyError,
    InvalidSecretApiKeyError,
)
from pinata_sdk.models.config import API_URL, ClientConfig
from pinata_sdk.models.filters import PinJobsFilter, PinListFilter
from pinata_sdk.models.metadata import ChangePinMetadata
from pinata_sdk.models.requests import HashPinPolicy, PinByFile, PinByHash, PinByJson
from pinata_sdk.models.results import (
    PinByHashResult,
    PinJobs,
    PinList,
    PinnedObject,
    TotalPinnedData,
)
from pinata_sdk.upload import assemble_parts

log = logging.getLogger(__name__)

T = TypeVar("T")


def validate_keys(api_key: str, secret_api_key: str) -> None:
    """Raise if either credential is empty."""
    if not api_key:
        raise InvalidApiKeyError()
    if not secret_api_key:
        raise InvalidSecretApiKeyError()


class PinataClient:
    """Async client for the Pinata pinning API.

    Holds a single ``httpx.AsyncClient`` carrying the two auth headers; it
    keeps no per-call state, so one instance can serve concurrent callers.

    Usage::

        async with PinataClient("api_key", "secret_api_key") as api:
            await api.test_authentication()
            pinned = await api.pin_file(PinByFile("file_or_dir_path"))
            print(pinned.ipfs_hash)
    """

    def __init__(
        self,
        api_key: str,
        secret_api_key: str,
        *,
        base_url: str = API_URL,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        validate_keys(api_key, secret_api_key)
        self._base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            headers={
                "pinata_api_key": api_key,
                "pinata_secret_api_key": secret_api_key,
            },
            timeout=timeout,
            transport=transport,
        )

    @classmethod
    def from_config(
        cls, cfg: ClientConfig, transport: httpx.AsyncBaseTransport | None = None
    ) -> PinataClient:
        return cls(
            cfg.api_key,
            cfg.secret_api_key,
            base_url=cfg.base_url,
            timeout=cfg.timeout,
            transport=transport,
        )

    async def aclose(self) -> None:
        """Close the underlying HTTP connection pool."""
        await self._client.aclose()

    async def __aenter__(self) -> PinataClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    # ── Endpoints ─────────────────────────────────────────

    async def test_authentication(self) -> None:
        """Check the credentials. Raises :class:`ApiError` if they are rejected."""
        resp = await self._request("GET", "/data/testAuthentication")
        self._parse_ok_result(resp)

    async def set_hash_pin_policy(self, policy: HashPinPolicy) -> None:
        """Change the pin policy of one piece of content.

        Does not touch the account level pin policy.
        """
        resp = await self._request("PUT", "/pinning/hashPinPolicy", json=policy.to_dict())
        self._parse_ok_result(resp)

    async def pin_by_hash(self, request: PinByHash) -> PinByHashResult:
        """Add a hash to Pinata's queue for asynchronous pinning.

        The content must already be available from another IPFS node.
        """
        resp = await self._request("POST", "/pinning/pinByHash", json=request.to_dict())
        return self._parse_result(resp, PinByHashResult.from_dict)

    async def get_pin_jobs(self, filters: PinJobsFilter | None = None) -> PinJobs:
        """List the pin-by-hash jobs currently in the queue."""
        params = (filters or PinJobsFilter()).to_params()
        resp = await self._request("GET", "/pinning/pinJobs", params=params)
        return self._parse_result(resp, PinJobs.from_dict)

    async def pin_json(self, request: PinByJson) -> PinnedObject:
        """Pin any JSON serializable object."""
        resp = await self._request("POST", "/pinning/pinJSONToIPFS", json=request.to_dict())
        return self._parse_result(resp, PinnedObject.from_dict)

    async def pin_file(self, request: PinByFile) -> PinnedObject:
        """Upload and pin files or directories.

        A directory is uploaded with everything below it and the returned
        hash is the directory's. Any unreadable file aborts the call before
        a request is sent.
        """
        parts = assemble_parts(request.paths)
        if not parts:
            raise ValueError(f"no files to upload under {', '.join(request.paths)}")
        files = [("file", (part.filename, part.content)) for part in parts]
        resp = await self._request(
            "POST", "/pinning/pinFileToIPFS", files=files, data=request.form_fields(),
        )
        return self._parse_result(resp, PinnedObject.from_dict)

    async def unpin(self, ipfs_hash: str) -> None:
        """Unpin content previously pinned on Pinata."""
        resp = await self._request("DELETE", f"/pinning/unpin/{ipfs_hash}")
        self._parse_ok_result(resp)

    async def change_hash_metadata(self, change: ChangePinMetadata) -> None:
        """Change the name and key/values of pinned content."""
        resp = await self._request("PUT", "/pinning/hashMetadata", json=change.to_dict())
        self._parse_ok_result(resp)

    async def get_total_user_pinned_data(self) -> TotalPinnedData:
        """Total combined size of everything pinned by this account."""
        resp = await self._request("GET", "/data/userPinnedDataTotal")
        return self._parse_result(resp, TotalPinnedData.from_dict)

    async def get_pin_list(self, filters: PinListFilter | None = None) -> PinList:
        """What this account has pinned, and since when."""
        params = (filters or PinListFilter()).to_params()
        resp = await self._request("GET", "/data/pinList", params=params)
        return self._parse_result(resp, PinList.from_dict)

    # ── Transport / response mapping ──────────────────────

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        log.debug("%s %s%s", method, self._base_url, path)
        resp = await self._client.request(method, path, **kwargs)
        log.debug("%s %s -> %d", method, path, resp.status_code)
        return resp

    def _parse_result(self, resp: httpx.Response, decode: Callable[[Any], T]) -> T:
        if not resp.is_success:
            raise self._service_error(resp)
        try:
            return decode(resp.json())
        except (ValueError, KeyError, TypeError) as exc:
            raise DecodeError(
                f"unexpected response body from {resp.request.url.path}: {exc}",
                status_code=resp.status_code,
                body=resp.text,
            ) from exc

    def _parse_ok_result(self, resp: httpx.Response) -> None:
        if not resp.is_success:
            raise self._service_error(resp)

    def _service_error(self, resp: httpx.Response) -> ApiError | DecodeError:
        try:
            message = _error_message(resp.json())
        except ValueError as exc:
            return DecodeError(
                f"undecodable error body (HTTP {resp.status_code}): {exc}",
                status_code=resp.status_code,
                body=resp.text,
            )
        log.warning(
            "Pinata %s %s failed (%d): %s",
            resp.request.method, resp.request.url.path, resp.status_code, message,
        )
        return ApiError(message, status_code=resp.status_code)


def _error_message(data: Any) -> str:
    """Extract the message from one of Pinata's error envelopes.

    Seen shapes: ``{"error": "msg"}``, ``{"error": {"reason": ..,
    "details": ..}}`` and ``{"message": "msg"}``.
    """
    if isinstance(data, dict):
        error = data.get("error")
        if isinstance(error, str):
            return error
        if isinstance(error, dict):
            pieces = [error.get(k) for k in ("reason", "details")]
            pieces = [p for p in pieces if isinstance(p, str) and p]
            if pieces:
                return ": ".join(pieces)
        message = data.get("message")
        if isinstance(message, str):
            return message
    raise ValueError("no error message in body")
