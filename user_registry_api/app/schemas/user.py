"""
Pydantic models for user data.

``UserPayload`` is what clients send when creating or replacing a
user, ``UserRead`` is what the API returns.  Both fields of the
payload are optional at the schema level: creation stores whatever it
receives, and the presence checks for replacement live in
``UserService`` so that they produce the API's own 400 message.
"""

from typing import Optional, Union

from pydantic import BaseModel, Field, StrictFloat, StrictInt, StrictStr

# Strict so that values are stored exactly as sent: ``true`` or ``"30"``
# are rejected rather than converted to numbers.
Age = Union[StrictInt, StrictFloat]


class UserPayload(BaseModel):
    """Request body for ``POST /users`` and ``PUT /users/{id}``.

    Unknown keys, including an ``id`` supplied by the client, are
    ignored.
    """

    name: Optional[StrictStr] = Field(None, examples=["Ana"])
    age: Optional[Age] = Field(None, examples=[30])


class UserRead(BaseModel):
    """Schema for reading a user from the API."""

    id: str
    name: Optional[StrictStr] = None
    age: Optional[Age] = None

    model_config = {
        "from_attributes": True,
    }
