"""
User endpoints.

CRUD routes for the user directory, mounted under ``/api/usuarios``.
Successful calls answer 200 with the user (or list of users) as JSON.
Unknown ids and invalid names are raised by ``UserService`` and turned
into plain-text 404 and 400 responses by the handlers registered in
``main.create_app``.

Bodies may be sent as JSON or as a URL-encoded form; either way the
name is read from the ``nombre`` field.  The collection routes answer with and
without a trailing slash, so the static files mounted at the site root
never shadow ``/api/usuarios/``.  The body is parsed here rather
than declared as a pydantic parameter so that validation failures
produce the single 400 message clients expect instead of FastAPI's 422
error list.
"""

import logging
from typing import Any, List

from fastapi import APIRouter, Depends, Request

from user_directory_api.app.schemas.user import UserRead
from user_directory_api.app.services.user_service import InvalidUserError, UserService

logger = logging.getLogger(__name__)

router = APIRouter()

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")
INVALID_BODY_MESSAGE = "El cuerpo de la petición no es JSON válido."


def get_user_service(request: Request) -> UserService:
    """Return the service bound to the running application."""
    return request.app.state.user_service


async def read_payload(request: Request) -> Any:
    """Decode the request body into a mapping.

    Requests without a body, or with a content type that is neither
    JSON nor a form, yield an empty mapping so validation reports the
    missing name.
    """
    content_type = request.headers.get("content-type", "").split(";")[0].strip().lower()
    if content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        return dict(form)
    if content_type == "application/json" or content_type.endswith("+json"):
        body = await request.body()
        if not body.strip():
            return {}
        try:
            return await request.json()
        except ValueError:
            logger.info("Rejected malformed JSON body on %s %s", request.method, request.url.path)
            raise InvalidUserError(INVALID_BODY_MESSAGE)
    return {}


@router.get("", response_model=List[UserRead])
@router.get("/", response_model=List[UserRead], include_in_schema=False)
async def list_users(service: UserService = Depends(get_user_service)) -> List[UserRead]:
    """Return every user in the directory."""
    return await service.list_users()


@router.get("/{user_id}", response_model=UserRead)
async def get_user(user_id: str, service: UserService = Depends(get_user_service)) -> UserRead:
    """Retrieve a single user by ID.  Returns HTTP 404 if not found."""
    return await service.get_user(user_id)


@router.post("", response_model=UserRead)
@router.post("/", response_model=UserRead, include_in_schema=False)
async def create_user(request: Request, service: UserService = Depends(get_user_service)) -> UserRead:
    """Create a user from ``{"nombre": ...}`` and return it with its new id."""
    payload = await read_payload(request)
    return await service.create_user(payload)


@router.put("/{user_id}", response_model=UserRead)
async def update_user(
    user_id: str,
    request: Request,
    service: UserService = Depends(get_user_service),
) -> UserRead:
    """Rename an existing user.

    The id is checked before the body, so an unknown id answers 404
    even when the name would also be rejected.
    """
    payload = await read_payload(request)
    return await service.update_user(user_id, payload)


@router.delete("/{user_id}", response_model=UserRead)
async def delete_user(user_id: str, service: UserService = Depends(get_user_service)) -> UserRead:
    """Delete a user and return the removed record."""
    return await service.delete_user(user_id)
