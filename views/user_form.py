import streamlit as st
from typing import Optional

from domain.constants import MSG_PHOTO_READ_FAILED
from domain.models import ShellState, SubmissionState, SubmissionSucceeded
from services import photos
from services.photos import PhotoReadError, PhotoRejected
from services.submission import submit_draft
from services.users_api import UsersApiClient
from ui.components import user_form

STATE_KEY = 'submission_state'
KEY_PREFIX = 'draft'


def get_state() -> SubmissionState:
    if STATE_KEY not in st.session_state:
        st.session_state[STATE_KEY] = SubmissionState()
    return st.session_state[STATE_KEY]


def unmount():
    """Drop the draft when the form leaves the screen; the next display starts empty."""
    state = st.session_state.get(STATE_KEY)
    if state is None or state.is_pristine():
        return
    st.session_state[STATE_KEY] = SubmissionState(uploader_nonce=state.uploader_nonce + 1,
                                                  clear_inputs=True)


def _keys(state: SubmissionState) -> dict:
    return user_form.field_keys(KEY_PREFIX, state.uploader_nonce)


def _sync_fields(state: SubmissionState):
    keys = _keys(state)
    state.draft.name = st.session_state.get(keys['name']) or ''
    state.draft.surname = st.session_state.get(keys['surname']) or ''
    birth = st.session_state.get(keys['birth_date'])
    state.draft.birth_date = birth.isoformat() if birth else ''


def _on_photo_change(state: SubmissionState):
    upload = st.session_state.get(_keys(state)['photo'])
    if upload is None:
        # file removed from the uploader
        state.draft.photo = None
        state.preview = None
        return
    try:
        photo, preview = photos.accept_photo(photos.photo_from_upload(upload))
    except PhotoRejected as e:
        # draft keeps whatever photo it had before
        state.error = str(e)
        return
    except PhotoReadError:
        state.error = MSG_PHOTO_READ_FAILED
        return
    state.draft.photo = photo
    state.preview = preview
    state.error = ''


def _on_submit(state: SubmissionState):
    _sync_fields(state)
    state.error = ''
    state.submitting = True


def view(shell: ShellState, client: UsersApiClient) -> Optional[SubmissionSucceeded]:
    """Render the submission form; returns an event once the API accepted a user."""
    state = get_state()

    # Deferred widget cleanup after a successful submission
    if state.clear_inputs:
        for k in ('name', 'surname', 'birth_date'):
            st.session_state.pop(_keys(state)[k], None)
        state.clear_inputs = False

    user_form.render(
        state,
        key_prefix=KEY_PREFIX,
        on_field_change=lambda: _sync_fields(state),
        on_photo_change=lambda: _on_photo_change(state),
        on_submit=lambda: _on_submit(state),
    )

    if not state.submitting:
        return None

    with st.spinner("Submitting..."):
        result = submit_draft(state.draft, client)

    if result.ok:
        state.reset()
        return SubmissionSucceeded(user=result.user)

    state.error = result.error
    state.submitting = False
    st.rerun()
