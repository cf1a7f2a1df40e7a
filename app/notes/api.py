import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response
from starlette.concurrency import run_in_threadpool
from starlette.requests import ClientDisconnect

from app.shared.gate import WriteGate, get_write_gate
from app.shared.http import ANY_METHOD, allow_only, err, status_body
from app.notes.schemas import StatusOut
from app.notes.store import SnapshotStore, StoreError, StoreNotFound, get_store

logger = logging.getLogger(__name__)
router = APIRouter(tags=["Notes"])

@router.api_route("/save", methods=ANY_METHOD, response_model=StatusOut,
                  dependencies=[Depends(allow_only("POST"))])
async def save_snapshot(
    request: Request,
    store: SnapshotStore = Depends(get_store),
    gate: WriteGate = Depends(get_write_gate),
):
    """Replace the stored snapshot with the raw request body."""
    async with gate:
        try:
            body = await request.body()
        except ClientDisconnect:
            err("Error reading request body", status=400)
        try:
            mirrored = await run_in_threadpool(store.save, body)
        except StoreError as e:
            err(str(e), status=500)
    if not mirrored:
        logger.info("Saved %d bytes; readable store left as it was", len(body))
    return status_body("success", "Data saved successfully")

@router.api_route("/load", methods=ANY_METHOD, response_class=Response,
                  dependencies=[Depends(allow_only("GET"))])
async def load_snapshot(store: SnapshotStore = Depends(get_store)):
    # no lock: stores are replaced by rename, so reads never see a partial file
    try:
        data = await run_in_threadpool(store.load)
    except StoreNotFound as e:
        err(str(e), status=404)
    except StoreError as e:
        err(str(e), status=500)
    return Response(content=data, media_type="application/json")
