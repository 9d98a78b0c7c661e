"""
This package provides the reusable UI components for the Streamlit application.

It is organized into several modules, each containing a specific category of components:
- `base`: Basic, general-purpose components like the CSS injector and error banner.
- `user_form`: The four-field user submission form.
- `user_table`: The HTML users table with photo thumbnails.

By importing the components here, we provide a single, consistent access point
for the rest of the application (`from ui import components`).
"""

from .base import (
    inject_base_css,
    error_banner,
    empty_state,
    photo_preview,
)

from .user_table import (
    render_user_table,
    table_html,
)
