"""
This module contains centralized constants used throughout the application,
ensuring a single source of truth for the API location, upload limits and the
user-facing messages shared by the views and services.
"""
import os


def _env_timeout(raw):
    if raw in (None, ''):
        return None
    try:
        return float(raw)
    except ValueError:
        return None


# Remote users endpoint (GET lists, POST creates)
API_URL = os.environ.get('USERS_API_URL', 'https://api.busesalman.com/users')
# None keeps requests waiting until the server answers
REQUEST_TIMEOUT = _env_timeout(os.environ.get('USERS_API_TIMEOUT'))

LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

# Photo upload constraints
MAX_PHOTO_BYTES = 5 * 1024 * 1024  # 5 MiB
IMAGE_MIME_PREFIX = 'image/'

# Shown when a photo URL cannot be loaded by the browser
BROKEN_PHOTO_URL = 'https://via.placeholder.com/40?text=Error'
MISSING_PHOTO_GLYPH = '?'

# Messages
MSG_INVALID_IMAGE = 'Please select a valid image file'
MSG_IMAGE_TOO_LARGE = 'Image size should be less than 5MB'
MSG_FIELDS_REQUIRED = 'All fields are required'
MSG_PHOTO_READ_FAILED = 'Failed to read the selected image'
MSG_SUBMIT_FAILED = 'Failed to submit form'
MSG_SOMETHING_WRONG = 'Something went wrong'
MSG_FETCH_FAILED = 'Failed to fetch users'
MSG_LOAD_FAILED = 'Failed to load users'
MSG_LOADING_USERS = 'Loading users...'
MSG_NO_USERS = 'No users found'

# Tab labels
TAB_FORM_LABEL = 'Add User'
TAB_LIST_LABEL = 'View Users'
