"""In-memory fake of the Pinata REST API, served through httpx.MockTransport."""

from __future__ import annotations

import hashlib
import json
from dataclasses import dataclass, field

import httpx

from tests.factories import (
    make_pin_job_payload,
    make_pin_list_item_payload,
    make_pinned_object_payload,
    make_total_pinned_payload,
)

VALID_KEY = "test-api-key"
VALID_SECRET = "test-secret-api-key"


@dataclass
class RecordedRequest:
    method: str
    path: str
    params: dict[str, str]
    headers: httpx.Headers
    content: bytes

    def json(self):
        return json.loads(self.content)


@dataclass
class StoredPin:
    ipfs_hash: str
    size: int
    name: str | None = None
    keyvalues: dict = field(default_factory=dict)


class FakePinataService:
    """Scripted Pinata service.

    Checks the auth headers, keeps pinned JSON content and its metadata so
    that pinList echoes back what pinJSONToIPFS received, and records every
    request. ``fail_with`` forces the next response for a path.
    """

    def __init__(self) -> None:
        self.requests: list[RecordedRequest] = []
        self.pins: dict[str, StoredPin] = {}
        self.jobs: list[dict] = []
        self._forced: dict[str, httpx.Response] = {}

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    @property
    def last(self) -> RecordedRequest:
        return self.requests[-1]

    def fail_with(self, path: str, response: httpx.Response) -> None:
        """Test helper: answer the next call to ``path`` with ``response``."""
        self._forced[path] = response

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(
            RecordedRequest(
                method=request.method,
                path=request.url.path,
                params=dict(request.url.params),
                headers=request.headers,
                content=request.content,
            )
        )
        path = request.url.path
        if path in self._forced:
            return self._forced.pop(path)

        if (
            request.headers.get("pinata_api_key") != VALID_KEY
            or request.headers.get("pinata_secret_api_key") != VALID_SECRET
        ):
            return httpx.Response(401, json={"error": "Invalid API key provided"})

        route = (request.method, path)
        if route == ("GET", "/data/testAuthentication"):
            return httpx.Response(
                200, json={"message": "Congratulations! You are communicating with the Pinata API!"}
            )
        if route == ("POST", "/pinning/pinJSONToIPFS"):
            return self._pin_json(json.loads(request.content))
        if route == ("POST", "/pinning/pinFileToIPFS"):
            return self._pin_file(request)
        if route == ("POST", "/pinning/pinByHash"):
            body = json.loads(request.content)
            job = make_pin_job_payload(
                ipfs_pin_hash=body["hashToPin"],
                name=(body.get("pinataMetadata") or {}).get("name"),
            )
            self.jobs.append(job)
            return httpx.Response(
                200,
                json={
                    "id": job["id"],
                    "ipfsHash": body["hashToPin"],
                    "status": job["status"],
                    "name": job["name"],
                },
            )
        if route == ("GET", "/pinning/pinJobs"):
            return httpx.Response(200, json={"count": len(self.jobs), "rows": self.jobs})
        if route == ("PUT", "/pinning/hashMetadata"):
            return self._change_metadata(json.loads(request.content))
        if route == ("PUT", "/pinning/hashPinPolicy"):
            body = json.loads(request.content)
            if body["ipfsPinHash"] not in self.pins:
                return httpx.Response(400, json={"error": "hash is not pinned"})
            return httpx.Response(200, text="OK")
        if route == ("GET", "/data/userPinnedDataTotal"):
            size = sum(p.size for p in self.pins.values())
            return httpx.Response(
                200, json=make_total_pinned_payload(len(self.pins), size, size * 2),
            )
        if route == ("GET", "/data/pinList"):
            return self._pin_list(dict(request.url.params))
        if request.method == "DELETE" and path.startswith("/pinning/unpin/"):
            ipfs_hash = path.rsplit("/", 1)[-1]
            if self.pins.pop(ipfs_hash, None) is None:
                return httpx.Response(
                    400,
                    json={"error": {"reason": "CURRENT_USER_HAS_NOT_PINNED_CID",
                                    "details": f"The current user has not pinned the cid: {ipfs_hash}"}},
                )
            return httpx.Response(200, text="OK")
        return httpx.Response(404, json={"error": f"no route for {request.method} {path}"})

    # ── Handlers ──────────────────────────────────────────

    def _store(self, payload: bytes, metadata: dict | None) -> httpx.Response:
        ipfs_hash = "Qm" + hashlib.sha256(payload).hexdigest()[:44]
        metadata = metadata or {}
        self.pins[ipfs_hash] = StoredPin(
            ipfs_hash=ipfs_hash,
            size=len(payload),
            name=metadata.get("name"),
            keyvalues=dict(metadata.get("keyvalues") or {}),
        )
        return httpx.Response(
            200, json=make_pinned_object_payload(ipfs_hash=ipfs_hash, pin_size=len(payload)),
        )

    def _pin_json(self, body: dict) -> httpx.Response:
        content = json.dumps(body["pinataContent"], sort_keys=True).encode()
        return self._store(content, body.get("pinataMetadata"))

    def _pin_file(self, request: httpx.Request) -> httpx.Response:
        if not request.headers.get("content-type", "").startswith("multipart/form-data"):
            return httpx.Response(400, json={"error": "Expected multipart form"})
        return self._store(request.content, None)

    def _change_metadata(self, body: dict) -> httpx.Response:
        pin = self.pins.get(body["ipfsPinHash"])
        if pin is None:
            return httpx.Response(400, json={"error": "hash is not pinned"})
        if "name" in body:
            pin.name = body["name"]
        for key, value in (body.get("keyvalues") or {}).items():
            if value is None:
                pin.keyvalues.pop(key, None)
            else:
                pin.keyvalues[key] = value
        return httpx.Response(200, text="OK")

    def _pin_list(self, params: dict[str, str]) -> httpx.Response:
        pins = list(self.pins.values())
        if contains := params.get("hashContains"):
            pins = [p for p in pins if contains in p.ipfs_hash]
        if name := params.get("metadata[name]"):
            pins = [p for p in pins if p.name == name]
        rows = [
            make_pin_list_item_payload(
                ipfs_pin_hash=p.ipfs_hash, size=p.size, name=p.name, keyvalues=p.keyvalues,
            )
            for p in pins
        ]
        return httpx.Response(200, json={"count": len(rows), "rows": rows})
