from __future__ import annotations

import os

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from starlette.middleware.sessions import SessionMiddleware

from .auth.dependencies import require_user
from .auth.models import LoginRequest, RegisterRequest
from .auth.users import authenticate, get_user, register
from .places.errors import InvalidInput, PlannerError
from .places.models import (
    GenerateRequest,
    GenerateResponse,
    SearchSpecificRequest,
    SearchSpecificResponse,
)
from .places.pipeline import generate, search_specific
from .trips.models import (
    SaveTripRequest,
    SaveTripResponse,
    TripDataResponse,
    TripListResponse,
)
from .trips.service import save_trip
from .trips.store import delete_trip, find_trips_by_user, get_trip

app = FastAPI(title="WayFinder Trip Planner API", version="1.0.0")
app.add_middleware(
    SessionMiddleware,
    secret_key=os.environ.get("SESSION_SECRET", "wayfinder-secret-change-in-production"),
    max_age=14 * 24 * 60 * 60,
)


def _failure(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "message": message})


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


# ── Auth endpoints ───────────────────────────────────────────────────────


@app.post("/auth/register")
def register_user(body: RegisterRequest, request: Request) -> dict:
    user = register(body.email, body.username, body.password)
    if not user:
        raise HTTPException(status_code=409, detail="Email already registered")
    request.session["user"] = user
    return {"status": "ok", "user": user}


@app.post("/auth/login")
def login(body: LoginRequest, request: Request) -> dict:
    user = authenticate(body.email, body.password)
    if not user:
        raise HTTPException(status_code=401, detail="Invalid credentials")
    request.session["user"] = user
    return {"status": "ok", "user": user}


@app.post("/auth/logout")
def logout(request: Request) -> dict:
    request.session.clear()
    return {"status": "logged_out"}


@app.get("/auth/me")
def auth_me(user: dict = Depends(require_user)) -> dict:
    current = get_user(user["id"])
    if not current:
        raise HTTPException(status_code=401, detail="Not authenticated")
    return current


# ── Place search ─────────────────────────────────────────────────────────


@app.post(
    "/api/generate",
    response_model=GenerateResponse,
    response_model_exclude_none=True,
)
def generate_places(body: GenerateRequest):
    try:
        result = generate(body.destination, body.mood)
    except InvalidInput as exc:
        return _failure(400, exc.message)
    except PlannerError as exc:
        return GenerateResponse(success=False, message=exc.message)

    return GenerateResponse(
        success=True,
        destination_coords=result.coords,
        places=result.places,
    )


@app.post(
    "/api/search-specific",
    response_model=SearchSpecificResponse,
    response_model_exclude_none=True,
)
def search_specific_places(body: SearchSpecificRequest) -> SearchSpecificResponse:
    # Missing query or coordinates: answered as a failed search with no places, not an error
    if not body.query or not body.query.strip() or body.lat is None or body.lon is None:
        return SearchSpecificResponse(success=False, places=[], message="Query and coordinates are required.")
    try:
        places = search_specific(body.query, body.lat, body.lon)
    except PlannerError as exc:
        return SearchSpecificResponse(success=False, message=exc.message)
    return SearchSpecificResponse(success=True, places=places)


# ── Trips ────────────────────────────────────────────────────────────────


@app.post(
    "/api/save-trip",
    response_model=SaveTripResponse,
    response_model_exclude_none=True,
)
def save_trip_endpoint(body: SaveTripRequest, user: dict = Depends(require_user)):
    try:
        trip = save_trip(user["id"], body.itinerary_data, overwrite=body.overwrite)
    except InvalidInput as exc:
        return _failure(400, exc.message)
    return SaveTripResponse(success=True, trip_id=trip.id)


@app.get("/api/my-trips", response_model=TripListResponse)
def my_trips(user: dict = Depends(require_user)) -> TripListResponse:
    trips = find_trips_by_user(user["id"])
    # Most recent first
    return TripListResponse(success=True, trips=[t.summary() for t in reversed(trips)])


@app.get("/api/get-trip/{trip_id}", response_model=TripDataResponse)
def get_trip_data(trip_id: str, user: dict = Depends(require_user)) -> TripDataResponse:
    trip = get_trip(user["id"], trip_id)
    if not trip:
        return TripDataResponse(success=False, message="Trip not found")
    return TripDataResponse(success=True, data=trip.data)


@app.delete("/api/delete-trip/{trip_id}")
def delete_trip_endpoint(trip_id: str, user: dict = Depends(require_user)) -> dict:
    delete_trip(user["id"], trip_id)
    return {"success": True}
