"""FastAPI main application."""
import logging
from fastapi import Depends, FastAPI, HTTPException, Query
from ghostfeed.config import settings
from ghostfeed.errors import RecordLoadError, SessionNotActiveError
from ghostfeed.logging_setup import configure_logging
from ghostfeed.models.feed import ALL, Feed, FilterCriteria, FilterOptions, SessionStatus
from ghostfeed.services.feed import FeedAssembler, filter_options
from ghostfeed.storage.record_store import RecordStore
from ghostfeed.storage.sessions import SessionRegistry, get_registry

configure_logging(settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.app_name, debug=settings.debug)

feed_assembler = FeedAssembler()


def _session_status(session_id: str, store: RecordStore) -> SessionStatus:
    return SessionStatus(
        session_id=session_id,
        status=store.status,
        error=str(store.last_error) if store.last_error else None,
        loaded_at=store.loaded_at,
        counts=store.snapshot.counts(),
    )


def _require_session(registry: SessionRegistry, session_id: str) -> RecordStore:
    if not registry.is_active(session_id):
        raise HTTPException(status_code=401, detail=f"Session '{session_id}' is not active")
    return registry.get(session_id)


@app.get("/")
async def root():
    """Root endpoint."""
    return {"message": settings.app_name, "version": "1.0.0"}


@app.get("/filters", response_model=FilterOptions)
async def get_filter_options():
    """Status and type choices for the feed filters."""
    return filter_options()


@app.post("/sessions/{session_id}", response_model=SessionStatus)
async def activate_session(
    session_id: str,
    registry: SessionRegistry = Depends(get_registry),
):
    """
    Activate a session and load its four record collections.

    A failed load keeps the session active in error state; retry via reload.
    """
    try:
        store = await registry.activate(session_id)
    except RecordLoadError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return _session_status(session_id, store)


@app.post("/sessions/{session_id}/reload", response_model=SessionStatus)
async def reload_session(
    session_id: str,
    registry: SessionRegistry = Depends(get_registry),
):
    """Re-fetch the collections for an active session."""
    try:
        store = await registry.reload(session_id)
    except SessionNotActiveError as e:
        raise HTTPException(status_code=401, detail=str(e))
    except RecordLoadError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return _session_status(session_id, store)


@app.get("/sessions/{session_id}", response_model=SessionStatus)
async def get_session(
    session_id: str,
    registry: SessionRegistry = Depends(get_registry),
):
    """Load state of an active session."""
    store = _require_session(registry, session_id)
    return _session_status(session_id, store)


@app.delete("/sessions/{session_id}", status_code=204)
async def deactivate_session(
    session_id: str,
    registry: SessionRegistry = Depends(get_registry),
):
    """Tear down a session and discard its records."""
    if not registry.deactivate(session_id):
        raise HTTPException(status_code=404, detail=f"Session '{session_id}' is not active")


@app.get("/sessions/{session_id}/transactions", response_model=Feed)
async def get_transactions(
    session_id: str,
    search: str = Query("", description="Case-insensitive search over description, merchant and type"),
    status: str = Query(ALL, description="Status filter or 'all'"),
    type_: str = Query(ALL, alias="type", description="Type token filter or 'all'"),
    registry: SessionRegistry = Depends(get_registry),
):
    """
    Get the decorated, filtered transaction feed for an active session.

    Items keep the upstream order (newest first).
    """
    store = _require_session(registry, session_id)
    criteria = FilterCriteria(search_term=search, status_filter=status, type_filter=type_)
    return feed_assembler.assemble(store, criteria)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
