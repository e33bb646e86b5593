from typing import Annotated

from fastapi import Depends, HTTPException, Request

from session import FlashcardSession, SessionStore


def get_store(request: Request) -> SessionStore:
    """The session store built at startup and kept on app.state."""
    return request.app.state.sessions


def get_session(
    session_id: str,
    store: Annotated[SessionStore, Depends(get_store)],
) -> FlashcardSession:
    session = store.get(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail="session not found")
    return session
