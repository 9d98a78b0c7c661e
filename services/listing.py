from __future__ import annotations
import logging

from domain.constants import MSG_LOAD_FAILED
from domain.models import FetchResult
from services.users_api import UsersApiClient, UsersApiError

logger = logging.getLogger(__name__)


def fetch_users(client: UsersApiClient) -> FetchResult:
    """Fetch the whole collection; errors come back on the result, never raised."""
    try:
        users = client.list_users()
    except UsersApiError as e:
        return FetchResult(error=e.message or MSG_LOAD_FAILED)
    logger.info("Fetched %d users", len(users))
    return FetchResult(users=users)
