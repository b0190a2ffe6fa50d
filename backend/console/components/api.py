from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Optional

import streamlit as st

from console import session
from console.api_client import ApiError, UnauthorizedError


@contextmanager
def api_call(success: Optional[str] = None):
    """Run API calls; 401 goes to login, other API errors become st.error."""
    try:
        yield
    except UnauthorizedError:
        session.handle_unauthorized()
    except ApiError as e:
        st.error(f"Erro ({e.status_code}): {e.detail}" if e.status_code else "API indisponível.")
    else:
        if success:
            st.toast(success, icon="✅")


def load(path: str, params: Optional[dict] = None, default: Any = None) -> Any:
    """Cached GET with the view's error handling; ``default`` on failure."""
    result = default if default is not None else []
    with api_call():
        result = session.client().query(path, params)
    return result


def mutate(method: str, path: str, payload: Optional[dict] = None, success: Optional[str] = None) -> bool:
    done = False
    with api_call(success):
        session.client().mutate(method, path, payload)
        done = True
    if done:
        st.rerun()
    return done
