from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.concurrency import run_in_threadpool

from app.shared.config import Settings, settings as default_settings
from app.shared.gate import WriteGate
from app.shared.http import ANY_METHOD, status_body
from app.notes.schemas import StatusOut
from app.notes.store import SnapshotStore, resolve_store_paths

# Routers Import
from app.notes.api import router as notes_router

TAGS_METADATA = [
    {"name": "Notes", "description": "Save and load the notes snapshot"},
    {"name": "Health", "description": "Service health"},
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    await run_in_threadpool(app.state.store.bootstrap)
    yield


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or default_settings

    app = FastAPI(
        title="Notes Snapshot Service",
        version="0.1.0",
        description="Stores and serves a single JSON snapshot of notes.",
        openapi_tags=TAGS_METADATA,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = SnapshotStore(resolve_store_paths(settings))
    app.state.write_gate = WriteGate()

    # ---- DEV-ONLY error handler ----
    if settings.ENV == "dev":
        @app.exception_handler(Exception)
        async def _dev_ex_handler(request: Request, exc: Exception):
            return JSONResponse(status_code=500, content={"detail": str(exc)})

    @app.api_route("/ping", methods=ANY_METHOD, response_model=StatusOut, tags=["Health"])
    def ping():
        return status_body("ok", "Server is running")

    app.include_router(notes_router)

    # static front-end last, so API paths win
    if settings.WEB_DIR.is_dir():
        app.mount("/", StaticFiles(directory=settings.WEB_DIR, html=True), name="web")

    return app


app = create_app()
