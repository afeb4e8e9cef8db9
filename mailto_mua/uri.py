"""Build ``mailto:`` URIs (RFC 2368) from a recipient and a subject."""

from __future__ import annotations

from typing import Optional
from urllib.parse import quote

MAILTO_SCHEME = "mailto:"


def build_mailto_uri(to: Optional[str] = None, subject: Optional[str] = None) -> str:
    """Return a ``mailto:`` URI for the given recipient and subject.

    Both parts are escaped independently. A missing part adds nothing to the
    URI, so ``build_mailto_uri()`` is just the bare scheme.
    """

    uri = MAILTO_SCHEME
    if to is not None:
        uri += quote(to, safe="@")
    if subject is not None:
        uri += "?subject=" + quote(subject, safe="")
    return uri
