from __future__ import annotations

import logging
from typing import Dict, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Security
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from ..domain.body_metrics.hr import (
    DegenerateSegment,
    NotEnoughSamples,
    heart_rate_drift,
)
from ..models import ActivityStreams, DriftReport, DriftResult
from ..platform.clients import HttpConnectionError, HttpStatusError
from ..platform.secrets import MissingSecret
from ..platform.wiring import (
    provide_heart_rate_drift_coordinator,
    provide_stream_fetcher,
)
from ..strava import HeartRateDriftCoordinator, MalformedResponse
from ..strava.application import ActivityStreamPort

logger = logging.getLogger(__name__)

router: APIRouter = APIRouter()

bearer_scheme = HTTPBearer(auto_error=False)

code_query = Query(..., description="One-time OAuth authorization code from Strava.")


def _to_http_exception(exc: Exception) -> HTTPException:
    if isinstance(exc, MissingSecret):
        logger.error("Strava credentials are not configured: %s", exc.key)
        return HTTPException(status_code=500, detail={"error": "Missing credentials"})
    if isinstance(exc, HttpStatusError) and exc.status_code == 401:
        return HTTPException(status_code=401, detail={"error": "Strava rejected the credentials"})
    if isinstance(exc, HttpConnectionError):
        logger.warning("Strava request failed: %s", exc)
        return HTTPException(status_code=502, detail={"error": "Error connecting to Strava"})
    if isinstance(exc, MalformedResponse):
        logger.warning("Unexpected Strava payload: %s", exc)
        return HTTPException(status_code=502, detail={"error": "Unexpected Strava response"})
    if isinstance(exc, (NotEnoughSamples, DegenerateSegment)):
        return HTTPException(status_code=422, detail={"error": str(exc)})
    logger.exception("Unhandled error in drift pipeline")
    return HTTPException(status_code=500, detail={"error": "Internal error"})


@router.get("/oauth/exchange")
async def exchange_authorization_code(
    code: str = code_query,
    service: HeartRateDriftCoordinator = Depends(provide_heart_rate_drift_coordinator),
) -> Dict[str, str]:
    """Trade the code from the Strava redirect for an access token."""
    try:
        token = await service.exchange_code(code)
    except (MissingSecret, HttpConnectionError, MalformedResponse) as exc:
        raise _to_http_exception(exc) from exc
    return {"access_token": token}


@router.get("/activities/{activity_id}/streams", response_model=ActivityStreams)
async def get_activity_streams(
    activity_id: int,
    credentials: Optional[HTTPAuthorizationCredentials] = Security(bearer_scheme),
    fetcher: ActivityStreamPort = Depends(provide_stream_fetcher),
) -> ActivityStreams:
    """Proxy the heart rate and time streams using the caller's token."""
    if credentials is None or not credentials.credentials:
        raise HTTPException(status_code=401, detail={"error": "Unauthorized"})
    try:
        samples = await fetcher.fetch(credentials.credentials, activity_id)
    except (HttpConnectionError, MalformedResponse) as exc:
        raise _to_http_exception(exc) from exc
    return samples.to_streams()


@router.post("/heart-rate-drift", response_model=DriftResult)
async def calculate_heart_rate_drift(streams: ActivityStreams) -> DriftResult:
    """Compute drift for streams that were exported beforehand."""
    try:
        drift = heart_rate_drift(streams.heartrate.data, streams.time.data)
    except (NotEnoughSamples, DegenerateSegment) as exc:
        raise _to_http_exception(exc) from exc
    return DriftResult(drift_percent=drift)


@router.get("/activities/{activity_id}/heart-rate-drift", response_model=DriftReport)
async def activity_heart_rate_drift(
    activity_id: int,
    code: str = code_query,
    service: HeartRateDriftCoordinator = Depends(provide_heart_rate_drift_coordinator),
) -> DriftReport:
    """Run the full pipeline for one activity after the OAuth redirect."""
    try:
        return await service.process(code, activity_id)
    except (
        MissingSecret,
        HttpConnectionError,
        MalformedResponse,
        NotEnoughSamples,
        DegenerateSegment,
    ) as exc:
        raise _to_http_exception(exc) from exc
