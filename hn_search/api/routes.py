from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from hn_search.schemas import SortKey, SubmitRequest, TermChangeRequest, ViewSnapshot
from hn_search.services.view_state import (
    ChangeSort,
    ChangeTerm,
    Dismiss,
    LoadMore,
    SearchSession,
    Submit,
)

router = APIRouter()


def get_search_session(request: Request) -> SearchSession:
    return request.app.state.search_session


@router.get("/session", response_model=ViewSnapshot)
async def read_session(session: SearchSession = Depends(get_search_session)) -> ViewSnapshot:
    return session.snapshot()


@router.put("/session/term", response_model=ViewSnapshot)
async def change_term(
    payload: TermChangeRequest,
    session: SearchSession = Depends(get_search_session),
) -> ViewSnapshot:
    return await session.dispatch(ChangeTerm(text=payload.text))


@router.post("/session/submit", response_model=ViewSnapshot)
async def submit_search(
    payload: SubmitRequest | None = None,
    session: SearchSession = Depends(get_search_session),
) -> ViewSnapshot:
    term = payload.term if payload else None
    return await session.dispatch(Submit(term=term))


@router.post("/session/more", response_model=ViewSnapshot)
async def load_more(session: SearchSession = Depends(get_search_session)) -> ViewSnapshot:
    return await session.dispatch(LoadMore())


@router.post("/session/dismiss/{object_id}", response_model=ViewSnapshot)
async def dismiss_hit(
    object_id: str,
    session: SearchSession = Depends(get_search_session),
) -> ViewSnapshot:
    return await session.dispatch(Dismiss(object_id=object_id))


@router.post("/session/sort/{sort_key}", response_model=ViewSnapshot)
async def change_sort(
    sort_key: SortKey,
    session: SearchSession = Depends(get_search_session),
) -> ViewSnapshot:
    return await session.dispatch(ChangeSort(key=sort_key))
