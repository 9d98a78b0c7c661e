"""Users table rendered as raw HTML inside a components iframe.

The iframe keeps the `onerror` fallback on thumbnails working; Streamlit's
markdown renderer strips event handler attributes.
"""
import html
from typing import List

import pandas as pd
import streamlit as st

from domain.constants import BROKEN_PHOTO_URL, MISSING_PHOTO_GLYPH
from domain.models import UserRecord
from utils.dates import format_birth_date

COLUMNS = ["Photo", "Name", "Birth Date", "User ID"]
ROW_HEIGHT = 64
HEADER_HEIGHT = 52

TABLE_CSS = """
<style>
body {margin:0; font-family: system-ui, -apple-system, 'Segoe UI', Roboto, sans-serif;}
table.users {width:100%; border-collapse:collapse; font-size:14px; color:#6B7280;}
table.users th {background:#F9FAFB; color:#111827; text-align:left; padding:14px 12px; font-weight:600;}
table.users td {padding:12px; border-top:1px solid #E5E7EB; white-space:nowrap;}
.avatar {height:40px; width:40px; border-radius:50%; overflow:hidden;}
.avatar img {height:100%; width:100%; object-fit:cover;}
.avatar .glyph {height:100%; width:100%; background:#E5E7EB; display:flex; align-items:center; justify-content:center;}
.uid {font-family: ui-monospace, SFMono-Regular, Menlo, monospace; font-size:12px;}
</style>
"""


def avatar_html(user: UserRecord) -> str:
    if not user.photo_url:
        return f"<div class='avatar'><div class='glyph'>{MISSING_PHOTO_GLYPH}</div></div>"
    src = html.escape(user.photo_url, quote=True)
    alt = html.escape(f"{user.name}'s profile", quote=True)
    fallback = html.escape(BROKEN_PHOTO_URL, quote=True)
    return (f"<div class='avatar'><img src=\"{src}\" alt=\"{alt}\" "
            f"onerror=\"this.onerror=null;this.src='{fallback}';\"/></div>")


def build_rows(users: List[UserRecord]) -> pd.DataFrame:
    rows = []
    for u in users:
        rows.append({
            "Photo": avatar_html(u),
            "Name": html.escape(f"{u.name} {u.surname}"),
            "Birth Date": html.escape(format_birth_date(u.birth_date)),
            "User ID": f"<span class='uid'>{html.escape(u.user_id)}</span>",
        })
    # Duplicate userIDs stay as separate rows; the positional index is the row key.
    return pd.DataFrame(rows, columns=COLUMNS)


def table_html(users: List[UserRecord]) -> str:
    df = build_rows(users)
    return TABLE_CSS + df.to_html(escape=False, index=False, classes="users", border=0)


def render_user_table(users: List[UserRecord]):
    st.components.v1.html(
        table_html(users),
        height=HEADER_HEIGHT + ROW_HEIGHT * len(users),
        scrolling=True,
    )
