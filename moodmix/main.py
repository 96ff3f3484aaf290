"""FastAPI application entry point.

Run with: uv run uvicorn moodmix.main:app --port 5001 --reload
"""

import os
import logging
from contextlib import asynccontextmanager
from logging.handlers import RotatingFileHandler

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, HTMLResponse
from fastapi.staticfiles import StaticFiles

from moodmix.state import get_state

_project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
load_dotenv(os.path.join(_project_root, ".env"))
_frontend_dist = os.path.join(_project_root, "frontend", "out")


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------
_log_file = os.path.join(_project_root, "output", "app.log")
os.makedirs(os.path.dirname(_log_file), exist_ok=True)
_handler = RotatingFileHandler(_log_file, maxBytes=2_000_000, backupCount=3)
_handler.setLevel(logging.DEBUG)
_handler.setFormatter(logging.Formatter(
    "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
))
logging.root.addHandler(_handler)
logging.root.setLevel(logging.DEBUG)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Lifespan — startup / shutdown hooks
# ---------------------------------------------------------------------------
@asynccontextmanager
async def lifespan(app: FastAPI):
    state = get_state()
    os.makedirs(os.path.dirname(state.service.store.path), exist_ok=True)
    logger.info(
        "MoodMix starting up — %d moods, entries at %s",
        len(state.catalog.moods()), state.service.store.path,
    )
    yield
    logger.info("MoodMix shutting down")


# ---------------------------------------------------------------------------
# App
# ---------------------------------------------------------------------------
app = FastAPI(
    title="MoodMix",
    version="1.0.0",
    lifespan=lifespan,
)


# ---------------------------------------------------------------------------
# CORS — allows the front-end dev server to call this backend
# ---------------------------------------------------------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://localhost:5173"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from moodmix.routers import config_routes, entries, mood  # noqa: E402

app.include_router(config_routes.router)
app.include_router(entries.router)
app.include_router(mood.router)


# ---------------------------------------------------------------------------
# Serve the static front-end export from frontend/out/
# ---------------------------------------------------------------------------
_spa_index = os.path.join(_frontend_dist, "index.html")

if os.path.isdir(os.path.join(_frontend_dist, "_next")):
    app.mount(
        "/_next",
        StaticFiles(directory=os.path.join(_frontend_dist, "_next")),
        name="frontend-assets",
    )


@app.get("/", response_class=HTMLResponse)
async def index():
    if not os.path.isfile(_spa_index):
        return HTMLResponse(
            "<h1>Frontend not built</h1>"
            "<p>Build the front-end into <code>frontend/out</code>, "
            "or call the JSON API under <code>/api</code>.</p>",
            status_code=200,
        )
    return FileResponse(_spa_index)


# ---------------------------------------------------------------------------
# CLI runner
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    import uvicorn

    print(f"\n  MoodMix is running at http://localhost:5001")
    print(f"  Logging to {_log_file}\n")
    uvicorn.run("moodmix.main:app", host="127.0.0.1", port=5001, reload=True)
