"""User factory building immutable user values from a descriptor."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Annotated, Any, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag


class TechExperience(BaseModel):
    """A technology paired with an experience score."""

    model_config = ConfigDict(frozen=True)

    title: str
    experience: int


def _tech_kind(value: Any) -> str:
    """Pick the TechEntry variant: bare strings are labels, everything else is structured."""

    if isinstance(value, str):
        return "label"
    return "experience"


TechEntry = Annotated[
    Union[
        Annotated[str, Tag("label")],
        Annotated[TechExperience, Tag("experience")],
    ],
    Discriminator(_tech_kind),
]


class UserDescriptor(BaseModel):
    """Input used to request the creation of a user."""

    model_config = ConfigDict(frozen=True)

    email: str = ""
    password: str = Field(default="", repr=False)
    techs: tuple[TechEntry, ...] = ()


class User(BaseModel):
    """User value produced by :func:`create_user`.

    The password stays readable as an attribute but is left out of ``repr``
    and of every serialized form.
    """

    model_config = ConfigDict(frozen=True)

    email: str
    password: str = Field(repr=False, exclude=True)
    techs: tuple[TechEntry, ...]


UserFactory = Callable[[UserDescriptor | Mapping[str, Any]], User]


def create_user(descriptor: UserDescriptor | Mapping[str, Any]) -> User:
    """Build a user from ``descriptor`` without touching any external resource.

    Mappings are validated into a :class:`UserDescriptor` first; malformed
    input raises ``pydantic.ValidationError``.
    """

    if not isinstance(descriptor, UserDescriptor):
        descriptor = UserDescriptor.model_validate(descriptor)

    return User(
        email=descriptor.email,
        password=descriptor.password,
        techs=descriptor.techs,
    )


def get_user_factory() -> UserFactory:
    """Dependency returning the factory used by request handlers."""

    return create_user
