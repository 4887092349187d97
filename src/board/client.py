"""
Remote Resource Client.

Issues list/create/update/delete requests for one board resource against
the community REST API. Every call is fire-once: no retries, no backoff,
no idempotency keys. The caller decides whether to try again.

Endpoints (per resource path, e.g. /hire):
- GET    {path}        -> list
- POST   {path}        -> create
- PUT    {path}/{id}   -> update
- DELETE {path}/{id}   -> remove
"""

import logging
from typing import Any, Dict, List, Optional

import requests

from src.board.errors import DeleteError, FetchError, NetworkFailure, ParseError, SaveError
from src.board.records import BoardRecord, parse_record, parse_records
from src.board.resources import ResourceSchema

logger = logging.getLogger(__name__)

NETWORK_FAILURE_MESSAGE = "Could not reach the community service. Please check your connection."


def get_headers() -> Dict[str, str]:
    """Headers for requests that carry a JSON body."""
    return {"Content-Type": "application/json"}


def _is_success(response: requests.Response) -> bool:
    return 200 <= response.status_code < 300


def _error_field(response: requests.Response) -> Optional[str]:
    """Pull the `error` string out of a JSON error body, if there is one."""
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and isinstance(body.get("error"), str) and body["error"]:
        return body["error"]
    return None


class ResourceClient:
    """
    HTTP client for one resource of the community API.

    Args:
        schema: Resource schema (supplies the API path and record model)
        base_url: API root, e.g. https://code-veda-backend.onrender.com
        timeout: Optional per-request timeout in seconds (None = no timeout)
    """

    def __init__(self, schema: ResourceSchema, base_url: str, timeout: Optional[float] = None):
        self.schema = schema
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    @property
    def collection_url(self) -> str:
        return f"{self.base_url}{self.schema.api_path}"

    def item_url(self, record_id: str) -> str:
        return f"{self.collection_url}/{record_id}"

    def list(self) -> List[BoardRecord]:
        """
        Fetch the full collection.

        Raises:
            FetchError: non-2xx status (carries the status code)
            ParseError: body is not a list of valid records
            NetworkFailure: the request could not complete
        """
        try:
            response = requests.get(self.collection_url, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise NetworkFailure(NETWORK_FAILURE_MESSAGE) from e

        if not _is_success(response):
            raise FetchError(response.status_code)

        try:
            payload = response.json()
        except ValueError as e:
            raise ParseError(f"{self.schema.api_path} returned a non-JSON body") from e

        return parse_records(self.schema.record_model, payload)

    def create(self, payload: Dict[str, Any]) -> Optional[BoardRecord]:
        """POST a new record. Raises SaveError or NetworkFailure."""
        return self._save("POST", self.collection_url, payload)

    def update(self, record_id: str, payload: Dict[str, Any]) -> Optional[BoardRecord]:
        """PUT a full replacement of a record's editable fields."""
        return self._save("PUT", self.item_url(record_id), payload)

    def remove(self, record_id: str) -> None:
        """
        DELETE a record.

        Raises:
            DeleteError: non-2xx status
            NetworkFailure: the request could not complete
        """
        try:
            response = requests.delete(self.item_url(record_id), timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise NetworkFailure(NETWORK_FAILURE_MESSAGE) from e

        if not _is_success(response):
            raise DeleteError(self.schema.delete_failed_message, response.status_code)

    def _save(self, method: str, url: str, payload: Dict[str, Any]) -> Optional[BoardRecord]:
        """
        Send a create or update. Any 2xx means the server stored the record.

        Returns:
            The saved record when the body is one, else None (wrapped or
            empty bodies are not an error; the caller refetches the list)
        """
        send = requests.post if method == "POST" else requests.put
        try:
            response = send(url, json=payload, headers=get_headers(), timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise NetworkFailure(NETWORK_FAILURE_MESSAGE) from e

        if not _is_success(response):
            message = _error_field(response) or self.schema.save_failed_message
            raise SaveError(message, response.status_code)

        try:
            return parse_record(self.schema.record_model, response.json())
        except (ValueError, ParseError) as e:
            logger.warning(f"{method} {self.schema.api_path} succeeded with an unrecognised body: {e}")
            return None
