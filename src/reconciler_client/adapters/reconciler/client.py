"""HTTP clients for the reconciler API.

Each operation is exactly one request/response exchange. The HTTP transport is
injected by the caller and never closed here; retries, polling and backoff are
left to whoever drives the client.
"""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import TYPE_CHECKING, Any, TypeAlias
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from reconciler_client.domain.durations import format_offset

from .errors import ReconcilerDecodeError, ReconcilerTransportError, UnexpectedStatusError
from .schema import State, StatusChange, StatusChangeList

if TYPE_CHECKING:
    from reconciler_client.config.reconciler import ReconcilerConfig

    from .schema import Cluster

log = logging.getLogger(__name__)

ReconcilerLogger: TypeAlias = logging.Logger | logging.LoggerAdapter[Any]

CLUSTERS_PATH = "/v1/clusters"
_REQUEST_HEADERS = {"Accept": "application/json"}


_DOT_SEGMENTS = frozenset({".", ".."})


def _path_segment(value: str) -> str:
    # URL normalisation collapses empty and dot segments into a different resource
    if not value or value in _DOT_SEGMENTS:
        raise ValueError(f"Invalid reconciler path segment: {value!r}")
    return quote(value, safe="")


def _cluster_path(cluster_id: str, *segments: str) -> str:
    parts = (cluster_id, *segments)
    return f"{CLUSTERS_PATH}/" + "/".join(_path_segment(part) for part in parts)


def _config_status_path(cluster_id: str, config_version: int) -> str:
    return _cluster_path(cluster_id, "configs", str(config_version), "status")


def _status_changes_path(cluster_id: str, offset: str | timedelta) -> str:
    if isinstance(offset, timedelta):
        offset = format_offset(offset)
    return _cluster_path(cluster_id, "statusChanges", offset)


def _read_json(response: httpx.Response) -> object:
    try:
        return response.json()
    except ValueError as exc:
        raise ReconcilerDecodeError(
            f"Reconciler response from {response.request.url} is not valid JSON",
            body=response.text,
        ) from exc


def _decode_state(response: httpx.Response) -> State:
    payload = _read_json(response)
    if not isinstance(payload, dict):
        raise ReconcilerDecodeError("Unexpected reconciler state payload", body=response.text)
    try:
        return State.model_validate(payload)
    except ValidationError as exc:
        raise ReconcilerDecodeError(
            f"Reconciler state payload is invalid: {exc}",
            body=response.text,
        ) from exc


def _decode_status_changes(response: httpx.Response) -> list[StatusChange]:
    payload = _read_json(response)
    if payload is None:
        return []
    if not isinstance(payload, list):
        raise ReconcilerDecodeError(
            "Unexpected reconciler status change payload",
            body=response.text,
        )
    try:
        return StatusChangeList.validate_python(payload)
    except ValidationError as exc:
        raise ReconcilerDecodeError(
            f"Reconciler status change payload is invalid: {exc}",
            body=response.text,
        ) from exc


class _ReconcilerClientBase:
    def __init__(self, *, config: ReconcilerConfig, logger: ReconcilerLogger | None) -> None:
        self._config = config
        self._log: ReconcilerLogger = logger or logging.LoggerAdapter(
            log, {"client": "reconciler"}
        )

    @property
    def config(self) -> ReconcilerConfig:
        return self._config

    def _url(self, path: str) -> str:
        return f"{self._config.url}{path}"

    def _transport_failure(
        self, method: str, url: str, exc: httpx.TransportError
    ) -> ReconcilerTransportError:
        self._log.warning("Reconciler request %s %s failed: %s", method, url, exc)
        return ReconcilerTransportError(
            f"{method} {url} failed: {exc}",
            method=method,
            url=url,
        )

    def _check_status(self, response: httpx.Response) -> httpx.Response:
        method = response.request.method
        url = str(response.request.url)
        if not response.is_success:
            self._log.warning(
                "Reconciler responded %s to %s %s: %s",
                response.status_code,
                method,
                url,
                response.text,
            )
            raise UnexpectedStatusError(
                f"Reconciler responded {response.status_code} to {method} {url}",
                status_code=response.status_code,
                body=response.text,
                method=method,
                url=url,
            )
        self._log.debug("Reconciler %s %s -> %s", method, url, response.status_code)
        return response


class ReconcilerClient(_ReconcilerClientBase):
    """Blocking client for the reconciler API.

    The injected ``httpx.Client`` may be shared between threads; the client keeps
    no per-call state of its own.
    """

    def __init__(
        self,
        http_client: httpx.Client,
        *,
        config: ReconcilerConfig,
        logger: ReconcilerLogger | None = None,
    ) -> None:
        super().__init__(config=config, logger=logger)
        self._http = http_client

    def apply_cluster_config(self, cluster: Cluster) -> State:
        """Register ``cluster`` as the new desired state and return the created version."""

        response = self._send("POST", CLUSTERS_PATH, payload=cluster.to_payload())
        return _decode_state(response)

    def delete_cluster(self, cluster_id: str) -> None:
        self._send("DELETE", _cluster_path(cluster_id))

    def get_cluster(self, cluster_id: str, config_version: int) -> State:
        response = self._send("GET", _config_status_path(cluster_id, config_version))
        return _decode_state(response)

    def get_latest_cluster(self, cluster_id: str) -> State:
        response = self._send("GET", _cluster_path(cluster_id, "status"))
        return _decode_state(response)

    def get_status_change(self, cluster_id: str, offset: str | timedelta) -> list[StatusChange]:
        """Return the status transitions within ``offset``, in the order the service sent them."""

        response = self._send("GET", _status_changes_path(cluster_id, offset))
        return _decode_status_changes(response)

    def _send(self, method: str, path: str, *, payload: object = None) -> httpx.Response:
        url = self._url(path)
        try:
            response = self._http.request(method, url, json=payload, headers=_REQUEST_HEADERS)
        except httpx.TransportError as exc:
            raise self._transport_failure(method, url, exc) from exc
        return self._check_status(response)


class AsyncReconcilerClient(_ReconcilerClientBase):
    """Non-blocking counterpart of ``ReconcilerClient`` over an ``httpx.AsyncClient``."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        *,
        config: ReconcilerConfig,
        logger: ReconcilerLogger | None = None,
    ) -> None:
        super().__init__(config=config, logger=logger)
        self._http = http_client

    async def apply_cluster_config(self, cluster: Cluster) -> State:
        response = await self._send("POST", CLUSTERS_PATH, payload=cluster.to_payload())
        return _decode_state(response)

    async def delete_cluster(self, cluster_id: str) -> None:
        await self._send("DELETE", _cluster_path(cluster_id))

    async def get_cluster(self, cluster_id: str, config_version: int) -> State:
        response = await self._send("GET", _config_status_path(cluster_id, config_version))
        return _decode_state(response)

    async def get_latest_cluster(self, cluster_id: str) -> State:
        response = await self._send("GET", _cluster_path(cluster_id, "status"))
        return _decode_state(response)

    async def get_status_change(
        self, cluster_id: str, offset: str | timedelta
    ) -> list[StatusChange]:
        response = await self._send("GET", _status_changes_path(cluster_id, offset))
        return _decode_status_changes(response)

    async def _send(self, method: str, path: str, *, payload: object = None) -> httpx.Response:
        url = self._url(path)
        try:
            response = await self._http.request(
                method, url, json=payload, headers=_REQUEST_HEADERS
            )
        except httpx.TransportError as exc:
            raise self._transport_failure(method, url, exc) from exc
        return self._check_status(response)
