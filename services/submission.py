"""Submission pipeline: validate -> encode -> transmit.

Each stage either hands its output to the next one or stops with a
`SubmissionResult` carrying the error and its kind. No stage touches Streamlit.
"""
from __future__ import annotations
import logging
from typing import Optional

from domain.constants import (MSG_FIELDS_REQUIRED, MSG_PHOTO_READ_FAILED,
                              MSG_SOMETHING_WRONG)
from domain.models import (ErrorKind, SubmissionPayload, SubmissionResult,
                           UserDraft)
from services.photos import PhotoReadError, strip_data_uri, to_data_uri
from services.users_api import UsersApiClient, UsersApiError

logger = logging.getLogger(__name__)


def validate_draft(draft: UserDraft) -> Optional[SubmissionResult]:
    if not draft.is_complete():
        return SubmissionResult(error=MSG_FIELDS_REQUIRED, error_kind=ErrorKind.VALIDATION)
    return None


def build_payload(draft: UserDraft) -> SubmissionPayload:
    """Re-read the photo and assemble the wire payload. Raises PhotoReadError."""
    photo_b64 = strip_data_uri(to_data_uri(draft.photo))
    return SubmissionPayload(
        name=draft.name.strip(),
        surname=draft.surname.strip(),
        birth_date=draft.birth_date,
        photo=photo_b64,
    )


def submit_draft(draft: UserDraft, client: UsersApiClient) -> SubmissionResult:
    failed = validate_draft(draft)
    if failed:
        return failed

    try:
        payload = build_payload(draft)
    except PhotoReadError:
        return SubmissionResult(error=MSG_PHOTO_READ_FAILED, error_kind=ErrorKind.PHOTO_READ)

    try:
        user = client.create_user(payload)
    except UsersApiError as e:
        return SubmissionResult(error=e.message or MSG_SOMETHING_WRONG, error_kind=ErrorKind.API)

    logger.info("User created user_id=%s", user.user_id)
    return SubmissionResult(user=user)
