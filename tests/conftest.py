import os
import sys

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from domain.models import PhotoFile, UserDraft  # noqa: E402


class FakeResponse:
    def __init__(self, status_code=200, body=None, text=None):
        self.status_code = status_code
        self._body = body
        self._text = text

    @property
    def ok(self):
        return 200 <= self.status_code < 400

    def json(self):
        if self._text is not None:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._body


class FakeSession:
    """Stands in for requests.Session; replays queued responses or raises."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def request(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        item = self.responses.pop(0)
        if isinstance(item, Exception):
            raise item
        return item


def make_photo(data=b'\x89PNG fake', mime_type='image/png', size=None, name='me.png'):
    return PhotoFile(name=name, mime_type=mime_type,
                     size=len(data) if size is None else size, read=lambda: data)


def make_draft(**overrides):
    fields = dict(name=' Ada ', surname=' Lovelace ', birth_date='1815-12-10', photo=make_photo())
    fields.update(overrides)
    return UserDraft(**fields)
