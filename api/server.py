"""FastAPI server for the AI clothing swap UI.

Serves the page and the endpoints its script calls:
- upload: one image per slot ("model" or "clothing"), first file wins
- swap: sends both images to Gemini and stores the generated result
"""

from contextlib import asynccontextmanager
from typing import Literal

from fastapi import FastAPI, File, HTTPException, UploadFile
from fastapi.responses import HTMLResponse

from clothswap.config import configure_logging, load_config
from clothswap.exceptions import SwapInProgressError
from clothswap.models import SwapState
from clothswap.services import GeminiSwapClient
from clothswap.shell import SwapController
from clothswap.ui import render_page, select_first_file


# Initialize controller (will be done on first request)
_controller: SwapController | None = None


def get_controller() -> SwapController:
    """Get or create the controller instance."""
    global _controller
    if _controller is None:
        config = load_config()  # Loads from .env automatically via pydantic-settings
        client = GeminiSwapClient(config.gemini, api_key=config.gemini_api_key)
        _controller = SwapController(client)
    return _controller


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    if _controller is not None and isinstance(_controller.client, GeminiSwapClient):
        await _controller.client.close()


app = FastAPI(
    title="AI Clothing Swap",
    description="Upload a model and a clothing item; Gemini puts the clothing on the model",
    version="1.0.0",
    lifespan=lifespan,
)


@app.get("/", response_class=HTMLResponse)
async def index():
    """Render the page for the current state."""
    return HTMLResponse(render_page(get_controller().state))


@app.get("/health")
async def health():
    """Health check endpoint."""
    controller = get_controller()
    configured = getattr(controller.client, "is_configured", True)
    return {
        "status": "ok",
        "gemini": "configured" if configured else "missing_api_key",
    }


@app.get("/api/state", response_model=SwapState)
async def get_state():
    return get_controller().state


@app.post("/api/upload/{slot}", response_model=SwapState)
async def upload_image(
    slot: Literal["model", "clothing"],
    files: list[UploadFile] | None = File(default=None),
):
    """Store the first uploaded file as the model or clothing image.

    Extra files are ignored; with no file at all the state is returned as is.
    """
    controller = get_controller()
    upload = select_first_file(files)
    if upload is None:
        return controller.state

    if slot == "model":
        return await controller.upload_model_image(upload)
    return await controller.upload_clothing_image(upload)


@app.post("/api/swap", response_model=SwapState)
async def swap():
    """Run the clothing swap and return the resulting state."""
    try:
        return await get_controller().swap()
    except SwapInProgressError as e:
        raise HTTPException(status_code=409, detail=str(e))


def main():
    import uvicorn

    config = load_config()
    configure_logging(config.server.log_level)
    uvicorn.run(
        app,
        host=config.server.host,
        port=config.server.port,
        log_level=config.server.log_level.lower(),
    )


if __name__ == "__main__":
    main()
