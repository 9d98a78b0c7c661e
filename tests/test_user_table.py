from domain.constants import BROKEN_PHOTO_URL, MISSING_PHOTO_GLYPH
from domain.models import UserRecord
from ui.components.user_table import avatar_html, build_rows, table_html


def _user(uid='u1', photo_url=None, name='Ada', birth_date='2001-05-03'):
    return UserRecord(user_id=uid, name=name, surname='Lovelace',
                      birth_date=birth_date, photo_url=photo_url)


def test_missing_photo_renders_glyph():
    assert f">{MISSING_PHOTO_GLYPH}<" in avatar_html(_user())


def test_photo_has_broken_image_fallback():
    out = avatar_html(_user(photo_url='https://cdn.test/a.png'))
    assert 'src="https://cdn.test/a.png"' in out
    assert BROKEN_PHOTO_URL in out
    assert 'onerror=' in out


def test_rows_show_full_name_and_raw_id():
    df = build_rows([_user(uid='abc-123')])
    assert list(df.columns) == ['Photo', 'Name', 'Birth Date', 'User ID']
    assert df.iloc[0]['Name'] == 'Ada Lovelace'
    assert 'abc-123' in df.iloc[0]['User ID']


def test_unparsable_birth_date_is_shown_raw():
    df = build_rows([_user(birth_date='not-a-date')])
    assert df.iloc[0]['Birth Date'] == 'not-a-date'


def test_duplicate_ids_render():
    out = table_html([_user(uid='dup'), _user(uid='dup', name='Grace')])
    assert out.count('dup') == 2
    assert 'Grace Lovelace' in out


def test_names_are_escaped():
    out = table_html([_user(name='<script>x</script>')])
    assert '<script>x' not in out
    assert '&lt;script&gt;' in out
