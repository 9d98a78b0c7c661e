import pytest
import requests

from conftest import FakeResponse, FakeSession
from domain.constants import MSG_FETCH_FAILED, MSG_SUBMIT_FAILED
from domain.models import SubmissionPayload
from services.users_api import UsersApiClient, UsersApiError, extract_error

URL = 'https://api.example.test/users'
PAYLOAD = SubmissionPayload(name='Ada', surname='Lovelace', birth_date='1815-12-10', photo='QUJD')


def client_with(*responses):
    session = FakeSession(*responses)
    return UsersApiClient(base_url=URL, timeout=None, session=session), session


def test_create_user_posts_camelcase_json():
    body = {'user': {'userID': 'u1', 'name': 'Ada', 'surname': 'Lovelace',
                     'birthDate': '1815-12-10', 'photoUrl': 'https://cdn.test/u1.png'}}
    client, session = client_with(FakeResponse(201, body))
    user = client.create_user(PAYLOAD)

    method, url, kwargs = session.calls[0]
    assert (method, url) == ('POST', URL)
    assert kwargs['json'] == {'name': 'Ada', 'surname': 'Lovelace',
                              'birthDate': '1815-12-10', 'photo': 'QUJD'}
    assert kwargs['headers']['Content-Type'] == 'application/json'
    assert kwargs['timeout'] is None
    assert user.user_id == 'u1'
    assert user.photo_url == 'https://cdn.test/u1.png'


def test_create_user_surfaces_server_error():
    client, _ = client_with(FakeResponse(400, {'error': 'Duplicate user'}))
    with pytest.raises(UsersApiError) as exc:
        client.create_user(PAYLOAD)
    assert exc.value.message == 'Duplicate user'
    assert exc.value.status == 400


def test_create_user_unparsable_error_body_falls_back():
    client, _ = client_with(FakeResponse(500, text='<html>oops</html>'))
    with pytest.raises(UsersApiError) as exc:
        client.create_user(PAYLOAD)
    assert exc.value.message == MSG_SUBMIT_FAILED


def test_list_users_parses_records():
    body = [{'userID': 'a', 'name': 'A', 'surname': 'B', 'birthDate': '2001-05-03'},
            {'userID': 'b', 'name': 'C', 'surname': 'D', 'birthDate': 'x', 'extra': 1}]
    client, session = client_with(FakeResponse(200, body))
    users = client.list_users()
    assert session.calls[0][0] == 'GET'
    assert [u.user_id for u in users] == ['a', 'b']
    assert users[0].photo_url is None


def test_list_users_error_without_message():
    client, _ = client_with(FakeResponse(503, {}))
    with pytest.raises(UsersApiError) as exc:
        client.list_users()
    assert exc.value.message == MSG_FETCH_FAILED


def test_transport_failure_is_wrapped():
    client, _ = client_with(requests.ConnectionError('connection refused'))
    with pytest.raises(UsersApiError) as exc:
        client.list_users()
    assert 'connection refused' in exc.value.message
    assert exc.value.status is None


@pytest.mark.parametrize('response, expected', [
    (FakeResponse(400, {'error': 'Bad'}), 'Bad'),
    (FakeResponse(400, {'error': ''}), 'fallback'),
    (FakeResponse(400, ['error']), 'fallback'),
    (FakeResponse(400, text='nope'), 'fallback'),
])
def test_extract_error(response, expected):
    assert extract_error(response, 'fallback') == expected
