"""Greeting endpoint backed by the user factory."""

from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from hello_api.logging import get_logger
from hello_api.services.create_user import UserDescriptor, UserFactory, get_user_factory

router = APIRouter(tags=["hello"])
_logger = get_logger("hello")

DEMO_USER = UserDescriptor(
    email="cintiafumi@gmail.com",
    password="123456",
    techs=(
        "Node.js",
        "ReactJS",
        "React Native",
        {"title": "Javascript", "experience": 100},
    ),
)


class HelloResponse(BaseModel):
    """Static greeting payload."""

    message: str


@router.api_route(
    "/",
    methods=["GET", "POST"],
    summary="Hello world",
    response_model=HelloResponse,
)
async def hello_world(
    factory: Annotated[UserFactory, Depends(get_user_factory)],
) -> HelloResponse:
    """Build the demo user and greet; the request itself is ignored."""

    user = factory(DEMO_USER)
    _logger.info("user.created email=%s techs=%d", user.email, len(user.techs))
    return HelloResponse(message="Hello World")
