"""HTTP client for the remote users endpoint (GET lists, POST creates)."""
from __future__ import annotations
import logging
from typing import Any, List, Optional

import requests

from domain.constants import (API_URL, MSG_FETCH_FAILED, MSG_SUBMIT_FAILED,
                              REQUEST_TIMEOUT)
from domain.models import (SubmissionPayload, UserRecord, user_from_dict,
                           users_from_list)

logger = logging.getLogger(__name__)


class UsersApiError(Exception):
    """Raised for non-2xx responses and transport failures."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status = status


def extract_error(response: Any, fallback: str) -> str:
    """Pull the `error` field out of a JSON error body, tolerating garbage."""
    try:
        body = response.json()
    except ValueError:
        return fallback
    if isinstance(body, dict):
        err = body.get('error')
        if isinstance(err, str) and err:
            return err
    return fallback


class UsersApiClient:

    def __init__(self, base_url: str = API_URL, timeout: Optional[float] = REQUEST_TIMEOUT,
                 session: Optional[requests.Session] = None):
        self.base_url = base_url
        self.timeout = timeout
        self.session = session or requests.Session()

    def _send(self, method: str, **kwargs):
        logger.info("%s %s", method, self.base_url)
        try:
            return self.session.request(method, self.base_url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            logger.exception("%s %s failed", method, self.base_url)
            raise UsersApiError(str(e)) from e

    def create_user(self, payload: SubmissionPayload) -> UserRecord:
        response = self._send('POST', json=payload.to_json(),
                              headers={'Content-Type': 'application/json'})
        if not response.ok:
            message = extract_error(response, MSG_SUBMIT_FAILED)
            logger.warning("POST %s -> %s: %s", self.base_url, response.status_code, message)
            raise UsersApiError(message, response.status_code)
        try:
            body = response.json()
        except ValueError as e:
            raise UsersApiError(MSG_SUBMIT_FAILED, response.status_code) from e
        user = body.get('user') if isinstance(body, dict) else None
        return user_from_dict(user or {})

    def list_users(self) -> List[UserRecord]:
        response = self._send('GET')
        if not response.ok:
            message = extract_error(response, MSG_FETCH_FAILED)
            logger.warning("GET %s -> %s: %s", self.base_url, response.status_code, message)
            raise UsersApiError(message, response.status_code)
        try:
            body = response.json()
        except ValueError as e:
            raise UsersApiError(MSG_FETCH_FAILED, response.status_code) from e
        return users_from_list(body)
