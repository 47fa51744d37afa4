"""User signup endpoint"""

import logging

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from registrar.core.containers import ApplicationContainer
from registrar.core.errors import MalformedRequestError, MethodNotAllowedError
from registrar.schemas.users import (
    SignupForm,
    UserCreatedResponse,
    UserResponse,
    UsersIndexResponse,
)
from registrar.services.users import UsersService

logger = logging.getLogger(__name__)

router = APIRouter()

# /users answers every method itself so that unsupported ones get the JSON 405 body
USERS_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]


async def parse_signup_form(request: Request) -> SignupForm:
    body = await request.body()
    try:
        return SignupForm.model_validate_json(body)
    except ValidationError as e:
        logger.debug("Unparsable signup body: %s", e.errors(include_input=False))
        raise MalformedRequestError()


@router.api_route("/users", methods=USERS_METHODS)
@inject
async def users(
    request: Request,
    users_service: UsersService = Depends(
        Provide[ApplicationContainer.services.users_service]
    ),
    index_enabled: bool = Depends(
        Provide[ApplicationContainer.config.USERS_INDEX_ENABLED]
    ),
):
    if request.method == "GET" and index_enabled:
        return await users_index(users_service)
    if request.method != "POST":
        raise MethodNotAllowedError()

    form = await parse_signup_form(request)
    user = await users_service.register(form)
    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content=UserCreatedResponse(id=user.id).model_dump(),
    )


async def users_index(users_service: UsersService) -> JSONResponse:
    users = await users_service.list_users()
    response = UsersIndexResponse(users=[UserResponse.model_validate(user) for user in users])
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content=response.model_dump(mode="json"),
    )
