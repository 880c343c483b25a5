"""Render database URLs for display.

``sanitize_url("postgresql+psycopg://brbs:s3cr3t@db/brbs")`` gives
``postgresql+psycopg://brbs:***@db/brbs``. Only the password component is
masked; secrets passed as query parameters are shown as-is.
"""

from sqlalchemy.engine import make_url


def sanitize_url(url: str) -> str:
    """Return `url` with its password replaced by ``***``."""
    return make_url(url).render_as_string(hide_password=True)
