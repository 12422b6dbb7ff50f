"""HTTP endpoint for the skill.

Provides a FastAPI app that accepts the platform's JSON request envelope,
routes it through the skill and returns the JSON response. Useful when the
skill is hosted behind an HTTPS endpoint rather than on Lambda.
"""

import logging
from typing import Any

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from config import Settings, configure_logging
from router import handler_name
from skill import build_router, invoke

log = logging.getLogger(__name__)

settings = Settings.from_env()

app = FastAPI(title="Hello World Skill")

# Built once, shared by every request
router = build_router(settings)


@app.post("/skill")
async def receive_request(request: Request) -> Any:
    """Route one platform request envelope and return the skill response."""
    try:
        event = await request.json()
    except ValueError:
        # JSONDecodeError and UnicodeDecodeError
        raise HTTPException(status_code=400, detail="Request body must be valid JSON")
    if not isinstance(event, dict):
        raise HTTPException(status_code=400, detail="Request body must be a JSON object")
    return JSONResponse(content=invoke(router, event))


@app.get("/health")
async def health():
    return JSONResponse(
        content={"status": "ok", "handlers": [handler_name(h) for h in router.handlers]}
    )


# If running directly, start the server (use uvicorn)
if __name__ == "__main__":
    import uvicorn
    configure_logging(settings.log_level)
    uvicorn.run(app, host=settings.host, port=settings.port)
