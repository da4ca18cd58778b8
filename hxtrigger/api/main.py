from fastapi import FastAPI
from fastapi.responses import HTMLResponse
from fastapi.middleware.cors import CORSMiddleware
import html
import logging
from contextlib import asynccontextmanager

from hxtrigger import __version__, count
from hxtrigger.api import counter as counter_routes
from hxtrigger.api import metrics as metrics_routes
from hxtrigger.config import Settings
from hxtrigger.htmx import HX_TRIGGER, HX_TRIGGER_AFTER_SETTLE, HX_TRIGGER_AFTER_SWAP

logger = logging.getLogger(__name__)

settings = Settings.from_environment()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan handler: log the count the process starts and stops with."""
    app.state.settings = settings
    logger.info(f"HX-Trigger sample starting (env={settings.env}, count={count.current()})")
    try:
        yield
    finally:
        logger.info(f"Shutting down, final count={count.current()}")


app = FastAPI(title="HX-Trigger Sample", version=__version__, lifespan=lifespan)

# Allow local dev servers to drive the endpoints. htmx can only see the
# trigger headers cross-origin if they are exposed.
if settings.is_development:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:8080",
            "http://127.0.0.1:8080",
            "http://localhost:5173",
            "http://127.0.0.1:5173",
        ],
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[HX_TRIGGER, HX_TRIGGER_AFTER_SETTLE, HX_TRIGGER_AFTER_SWAP],
        allow_credentials=False,
    )


INDEX_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <title>HX-Trigger Sample</title>
  <script src="{script_url}"></script>
</head>
<body>
  <h1>HX-Trigger Sample</h1>
  <p>Clicking the button posts to <code>/increase-count</code>. The empty
  response carries an <code>HX-Trigger</code> header which fires the
  <code>{event}</code> event; the count below listens for it and reloads.</p>
  <button hx-post="/increase-count" hx-swap="none">Increase count</button>
  <div id="count" hx-get="/current-count" hx-trigger="load, {event} from:body">Loading...</div>
</body>
</html>
"""


@app.get("/", response_class=HTMLResponse)
def index():
    """Serve the demo page wiring a button and a count display together."""
    return INDEX_TEMPLATE.format(
        script_url=html.escape(settings.htmx_script_url, quote=True),
        event=counter_routes.LATEST_COUNT,
    )


@app.get("/api/health")
def health():
    """Simple health endpoint for smoke tests."""
    return {"status": "ok", "service": "hxtrigger", "version": __version__}


app.include_router(counter_routes.router)
app.include_router(metrics_routes.router)
