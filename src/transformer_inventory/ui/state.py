"""
Session state helpers for the Streamlit page.

Kept free of Streamlit imports so the reset rules can be exercised with a
plain dict standing in for ``st.session_state``.
"""

import hashlib
from typing import MutableMapping, Optional

from ..classification.rules import ALL
from ..reporting.filters import ViewState

VIEW_KEY = "view"
FINGERPRINT_KEY = "dataset_fingerprint"

WIDGET_DEFAULTS = {
    "substation_select": ALL,
    "feeder_select": ALL,
    "query_input": "",
    "min_kva_input": "",
    "blocks_checkbox": True,
}


def dataset_fingerprint(raw_text: str, config_text: Optional[str] = None) -> str:
    """Digest of the dataset and override table currently loaded."""
    h = hashlib.sha256(raw_text.encode("utf-8"))
    h.update(b"\0")
    h.update((config_text or "").encode("utf-8"))
    return h.hexdigest()


def reset_session(session: MutableMapping) -> None:
    session[VIEW_KEY] = ViewState()
    session.update(WIDGET_DEFAULTS)


def sync_session(session: MutableMapping, fingerprint: str) -> bool:
    """
    Reset the view and filter widgets when the loaded content changes.

    Returns True when a reset happened.
    """
    previous = session.get(FINGERPRINT_KEY)
    session[FINGERPRINT_KEY] = fingerprint
    if previous is None or previous == fingerprint:
        return False
    reset_session(session)
    return True
