"""User and exercise log routes."""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from ...services import ExerciseService, UserService

router = APIRouter(prefix="/api/users", tags=["users"])


def get_user_service(request: Request) -> UserService:
    """Get the user service from app state."""
    return request.app.state.user_service


def get_exercise_service(request: Request) -> ExerciseService:
    """Get the exercise service from app state."""
    return request.app.state.exercise_service


async def read_payload(request: Request) -> dict:
    """Read a JSON or form-encoded request body as a plain dict.

    Values are passed through untyped; the services do their own coercion.
    An empty or unparseable body yields an empty dict.
    """
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            payload = await request.json()
        except ValueError:
            return {}
        return payload if isinstance(payload, dict) else {}
    if content_type.startswith(
        ("application/x-www-form-urlencoded", "multipart/form-data")
    ):
        form = await request.form()
        return dict(form)
    return {}


@router.post("")
async def create_user(request: Request):
    """Create a new user."""
    payload = await read_payload(request)
    user = await get_user_service(request).create_user(payload.get("username"))
    return JSONResponse(status_code=201, content=user)


@router.get("")
async def list_users(request: Request):
    """List all users."""
    return await get_user_service(request).get_all_users()


@router.get("/{user_id}")
async def get_user(request: Request, user_id: str):
    """Get a single user."""
    return await get_user_service(request).get_user_by_id(user_id)


@router.post("/{user_id}/exercises")
async def create_exercise(request: Request, user_id: str):
    """Log an exercise for a user."""
    payload = await read_payload(request)
    result = await get_exercise_service(request).create_exercise(
        user_id,
        description=payload.get("description"),
        duration=payload.get("duration"),
        date=payload.get("date"),
    )
    return JSONResponse(
        status_code=201,
        content={
            "_id": result["userId"],
            "username": result["username"],
            "description": result["description"],
            "duration": result["duration"],
            "date": result["date"],
        },
    )


@router.get("/{user_id}/logs")
async def get_exercise_log(request: Request, user_id: str):
    """Get a user's exercise log, optionally filtered by ?from, ?to and ?limit."""
    params = request.query_params
    result = await get_exercise_service(request).get_exercise_log(
        user_id,
        date_from=params.get("from"),
        date_to=params.get("to"),
        limit=params.get("limit"),
    )
    return {
        "_id": result["id"],
        "username": result["username"],
        "count": result["count"],
        "log": result["logs"],
    }
