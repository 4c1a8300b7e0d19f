"""
Normalisation of hosted record-store responses.

The record store answers every call with an envelope::

    {"success": true, "data": ...}
    {"success": false, "message": "..."}

Batch calls (create/update/delete) add a ``results`` list holding one
``{"success": bool, "data"|"message": ..., "statusCode": int}`` entry
per record.  A batch may report ``success: true`` overall while
individual entries failed; those are surfaced as
:class:`PartialFailure` rather than returned as a partial result.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from farm_manager_api.app.core.errors import NotFound, PartialFailure, RequestFailed

logger = logging.getLogger(__name__)


def _check_success(response: Dict[str, Any], action: str) -> None:
    if not response.get("success"):
        message = response.get("message") or f"Failed to {action}"
        logger.error("Records API rejected %s: %s", action, message)
        raise RequestFailed(message)


def unwrap_list(response: Dict[str, Any], table: str) -> List[Dict[str, Any]]:
    """Return the records of a list response.  Missing data is an empty list."""
    _check_success(response, f"list {table}")
    data = response.get("data") or []
    if not isinstance(data, list):
        raise RequestFailed(f"Unexpected list payload for {table}")
    return data


def unwrap_single(response: Dict[str, Any], table: str, record_id: int) -> Dict[str, Any]:
    """Return the record of a get-by-id response.

    An unsuccessful envelope, or one without data, means the record
    does not exist.
    """
    data = response.get("data")
    if not response.get("success") or not data:
        if response.get("message"):
            logger.info("Records API has no %s %s: %s", table, record_id, response["message"])
        raise NotFound(table, record_id)
    return data


def partition(results: List[Dict[str, Any]]):
    """Split batch entries into ``(succeeded, failed)`` lists."""
    succeeded = [r for r in results if r.get("success")]
    failed = [r for r in results if not r.get("success")]
    return succeeded, failed


def _failure_message(entry: Dict[str, Any]) -> str:
    if entry.get("message"):
        return str(entry["message"])
    errors = entry.get("errors") or []
    if errors:
        first = errors[0]
        if isinstance(first, dict):
            return str(first.get("message") or first)
        return str(first)
    return "unknown error"


def unwrap_batch(
    response: Dict[str, Any],
    table: str,
    action: str,
    record_ids: List[int] | None = None,
) -> List[Dict[str, Any]]:
    """Return the successful entries of a batch response.

    Raises:
        RequestFailed: The call failed overall or returned no results.
        NotFound: Every entry failed with status 404.
        PartialFailure: At least one entry failed.
    """
    _check_success(response, f"{action} {table}")
    results = response.get("results")
    if not results:
        raise RequestFailed(f"No results returned for {action} on {table}")

    succeeded, failed = partition(results)
    if failed:
        if not succeeded and all(entry.get("statusCode") == 404 for entry in failed):
            missing = record_ids[0] if record_ids and len(record_ids) == 1 else record_ids
            raise NotFound(table, missing)
        detail = _failure_message(failed[0])
        logger.error("Failed to %s %d of %d %s records: %s", action, len(failed), len(results), table, detail)
        raise PartialFailure(action, len(failed), len(results), detail)
    return succeeded
