from __future__ import annotations

from fastapi import FastAPI

from .routes.strava import router as strava_router

app: FastAPI = FastAPI(
    title="Heart Rate Drift",
    version="1.0.0",
    description="Computes heart rate drift for a Strava activity",
)


@app.api_route("/", methods=["GET", "HEAD"], include_in_schema=False)
@app.api_route("/healthz", methods=["GET", "HEAD"], include_in_schema=False)
async def healthz() -> dict[str, str]:
    """Lightweight endpoint used for health checks."""
    return {"status": "ok"}


app.include_router(strava_router)
