"""
User lookup endpoint.
"""

from uuid import UUID

from fastapi import Response, status
from fastapi.responses import PlainTextResponse
from pydantic_core import PydanticSerializationError

from user_service.api.route_table import JSON_MEDIA_TYPE, UNKNOWN_ERROR, USER_NOT_FOUND
from user_service.models.user import User

NIL_UUID = UUID(int=0)


async def get_user_by_id(user_id: UUID) -> Response:
    """
    Get user account by user id.

    The nil UUID is reserved and never resolves to a user; every other id
    yields the placeholder account carrying the requested id.
    """
    if user_id == NIL_UUID:
        return PlainTextResponse(USER_NOT_FOUND, status_code=status.HTTP_404_NOT_FOUND)

    user = User.placeholder(user_id)
    try:
        body = user.to_json()
    except (PydanticSerializationError, ValueError):
        return PlainTextResponse(
            UNKNOWN_ERROR,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    return Response(content=body, media_type=JSON_MEDIA_TYPE)
