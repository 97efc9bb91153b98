from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, File, UploadFile
from fastapi.responses import HTMLResponse
from fastapi.concurrency import run_in_threadpool

from models import PathState
from logic.xml_tree import load_replay_states
from app.config import LOG_LEVEL, MAX_UPLOAD_BYTES, PORT, SHOW_PATHS
from app.page import render_error_page, render_index_page, render_results_page


logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)


app = FastAPI(title="Pirots2ASCII")


@app.get("/", response_class=HTMLResponse)
async def index() -> str:
    return render_index_page()


@app.post("/upload", response_class=HTMLResponse)
async def upload(xmlfile: Optional[UploadFile] = File(default=None)) -> HTMLResponse:
    if xmlfile is None or not xmlfile.filename:
        return HTMLResponse("Please select a file", status_code=400)

    content = await xmlfile.read(MAX_UPLOAD_BYTES + 1)
    if len(content) > MAX_UPLOAD_BYTES:
        logger.warning("Rejected upload %s larger than %d bytes", xmlfile.filename, MAX_UPLOAD_BYTES)
        return HTMLResponse("File too large", status_code=413)

    try:
        states = await run_in_threadpool(load_replay_states, content)
    except Exception as exc:
        logger.exception("Failed to parse upload %s", xmlfile.filename)
        return HTMLResponse(render_error_page(str(exc)), status_code=500)

    if not SHOW_PATHS:
        states = [state for state in states if not isinstance(state, PathState)]
    logger.info("Parsed %s into %d game state(s)", xmlfile.filename, len(states))
    return HTMLResponse(render_results_page(states, xmlfile.filename))


@app.get("/healthz")
async def healthz() -> dict[str, str]:
    """Simple health-check endpoint.

    Returns a JSON response indicating the application is up. Used by the
    hosting platform to verify the service is healthy.
    """
    return {"status": "ok"}


def run() -> None:
    import uvicorn

    logger.info("Pirots2ASCII server running on http://localhost:%d", PORT)
    uvicorn.run(app, host="0.0.0.0", port=PORT)


if __name__ == "__main__":
    run()
