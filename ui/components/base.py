import html

import streamlit as st

RED_BG = "#FEF2F2"  # red-50
RED_TEXT = "#B91C1C"  # red-700
GRAY_TEXT = "#6B7280"  # gray-500
GRAY_BORDER = "#E5E7EB"


def inject_base_css():
    # must be emitted on every script run
    st.markdown(
        f"""
        <style>
        .error-banner {{
            border-radius:6px; padding:12px 16px; margin-bottom:12px;
            background:{RED_BG}; color:{RED_TEXT}; font-size:14px;
        }}
        .empty-state {{
            text-align:center; padding:40px 0; color:{GRAY_TEXT};
        }}
        .empty-state.bordered {{border:1px solid {GRAY_BORDER}; border-radius:8px;}}
        .photo-preview {{
            height:96px; width:96px; object-fit:cover; border-radius:6px; margin-top:8px;
        }}
        </style>
        """,
        unsafe_allow_html=True,
    )


def error_banner(message: str):
    if not message:
        return
    st.markdown(f"<div class='error-banner'>{html.escape(message)}</div>", unsafe_allow_html=True)


def empty_state(message: str, bordered: bool = False):
    cls = "empty-state bordered" if bordered else "empty-state"
    st.markdown(f"<div class='{cls}'>{html.escape(message)}</div>", unsafe_allow_html=True)


def photo_preview(data_uri: str):
    st.markdown(
        f"<img class='photo-preview' src='{html.escape(data_uri, quote=True)}' alt='Profile preview'/>",
        unsafe_allow_html=True,
    )
