# routers/sessions.py
from typing import Annotated

from fastapi import APIRouter, Depends

from deps.state import get_session, get_store
from schemas.cards import CardView, SessionOut
from session import FlashcardSession, SessionStore

router = APIRouter(prefix="/sessions", tags=["sessions"])


@router.post("", response_model=SessionOut, status_code=201)
def create_session(store: Annotated[SessionStore, Depends(get_store)]):
    sid, session = store.create()
    return SessionOut(id=sid, view=session.view())


@router.get("/{session_id}", response_model=CardView)
def get_card(session: Annotated[FlashcardSession, Depends(get_session)]):
    return session.view()


@router.post("/{session_id}/reveal", response_model=CardView)
def reveal_answer(session: Annotated[FlashcardSession, Depends(get_session)]):
    session.reveal()
    return session.view()


@router.post("/{session_id}/next", response_model=CardView)
def next_question(session: Annotated[FlashcardSession, Depends(get_session)]):
    session.next()
    return session.view()
