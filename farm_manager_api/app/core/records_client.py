"""Hosted record-store API client.

This module defines a thin client around the hosted, table-oriented
record API used by the remote storage backend.  Every table is
addressed by name (``crop_c``, ``farm_c``, ...) and supports five
operations:

* :meth:`RecordsClient.fetch_records` – list records, with a field selector.
* :meth:`RecordsClient.get_record_by_id` – fetch one record.
* :meth:`RecordsClient.create_records` – batch insert.
* :meth:`RecordsClient.update_records` – batch update (records carry ``Id``).
* :meth:`RecordsClient.delete_records` – batch delete by ``RecordIds``.

Responses are JSON envelopes with a ``success`` flag.  Batch operations
additionally return a ``results`` list with one ``{success, data}`` or
``{success, message}`` entry per record.  Interpreting the envelope is
the job of :mod:`farm_manager_api.app.storage.results`; this client only
deals with transport and HTTP status codes.

The client uses the ``requests`` library and is therefore blocking.
The remote backend runs it in a worker thread.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

from farm_manager_api.app.core.errors import BackendUnavailable, NotFound, RequestFailed


logger = logging.getLogger(__name__)


class RecordsClient:
    """Client for the hosted record-store API."""

    def __init__(
        self,
        *,
        base_url: str,
        project_id: str,
        public_key: str,
        timeout: float = 15,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``https://api.example.com/v1``.
            project_id: Project identifier sent in the ``X-Project-Id`` header.
            public_key: Public key sent as ``Authorization: Bearer <key>``.
            timeout: Per-request timeout in seconds.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
        """
        self.base_url = base_url.rstrip("/")
        self.project_id = project_id
        self.public_key = public_key
        self.timeout = timeout
        self.session = session or requests.Session()

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(
        self,
        method: str,
        path: str,
        *,
        params: Dict[str, Any] | None = None,
        json_body: Any | None = None,
    ) -> Dict[str, Any]:
        """Perform an HTTP request and return the decoded JSON envelope.

        Raises:
            BackendUnavailable: The API could not be reached or timed out.
            NotFound: The API answered 404 for a single-record path.
            RequestFailed: Any other HTTP error status or a body that is
                not a JSON object.
        """
        url = f"{self.base_url}{path}"
        headers: Dict[str, str] = {"X-Project-Id": self.project_id}
        if self.public_key:
            headers["Authorization"] = f"Bearer {self.public_key}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
        except (requests.ConnectionError, requests.Timeout) as exc:
            logger.error("Records API unreachable: %s", exc)
            raise BackendUnavailable(f"Records API unreachable: {exc}") from exc
        except requests.RequestException as exc:
            logger.error("Records API request failed: %s", exc)
            raise RequestFailed(str(exc)) from exc

        if response.status_code >= 400:
            message = ""
            try:
                err_json = response.json()
                message = err_json.get("message") or err_json.get("detail") or str(err_json)
            except ValueError:
                message = response.text
            if not message:
                message = f"HTTP {response.status_code}"
            logger.error("Records API request failed (%s): %s", response.status_code, message)
            raise RequestFailed(message, status_code=response.status_code)

        try:
            data = response.json()
        except ValueError as exc:
            raise RequestFailed("Records API returned a non-JSON body") from exc
        if not isinstance(data, dict):
            raise RequestFailed("Records API returned an unexpected payload")
        return data

    # ------------------------------------------------------------------
    # Table operations
    # ------------------------------------------------------------------
    def fetch_records(self, table: str, params: Dict[str, Any]) -> Dict[str, Any]:
        """List records of ``table``; ``params`` carries the field selector."""
        return self._request("POST", f"/tables/{table}/records/query", json_body=params)

    def get_record_by_id(self, table: str, record_id: int, params: Dict[str, Any]) -> Dict[str, Any]:
        """Fetch a single record.  A 404 answer raises :class:`NotFound`."""
        try:
            return self._request("POST", f"/tables/{table}/records/{record_id}/query", json_body=params)
        except RequestFailed as exc:
            if exc.status_code == 404:
                raise NotFound(table, record_id) from exc
            raise

    def create_records(self, table: str, params: Dict[str, Any]) -> Dict[str, Any]:
        """Insert ``params["records"]``."""
        return self._request("POST", f"/tables/{table}/records", json_body=params)

    def update_records(self, table: str, params: Dict[str, Any]) -> Dict[str, Any]:
        """Update ``params["records"]``; every record must carry its ``Id``."""
        return self._request("PUT", f"/tables/{table}/records", json_body=params)

    def delete_records(self, table: str, params: Dict[str, Any]) -> Dict[str, Any]:
        """Delete the records listed in ``params["RecordIds"]``."""
        return self._request("DELETE", f"/tables/{table}/records", json_body=params)
