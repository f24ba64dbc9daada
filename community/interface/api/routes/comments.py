"""Comment routes."""

import json

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, status
from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PayloadValidationError

from community.application.usecase.auth import AuthenticateCallerUseCase
from community.application.usecase.comment import (
    CommentItem,
    CreateCommentRequest,
    CreateCommentUseCase,
    GetCommentsRequest,
    GetCommentsUseCase,
)
from community.domain.error import ValidationError
from community.interface.api.errors import describe_validation_errors
from community.interface.api.gateway import authenticate

router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    model_config = ConfigDict(populate_by_name=True)

    post_id: str | None = Field(default=None, alias="postId")
    content: str | None = None


class CreateCommentAPIResponse(BaseModel):
    """API response for a created comment."""

    message: str


@router.get("/{post_id}", response_model=list[CommentItem])
async def get_comments(
    post_id: str,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
) -> list[CommentItem]:
    """List comments on a post, oldest first.

    Raises:
        ValidationError: If post_id is not a UUID (400)
    """
    response = await get_comments_use_case.execute(GetCommentsRequest(post_id=post_id))
    return response.comments


async def read_comment_body(request: Request) -> CreateCommentAPIRequest:
    """Parse the JSON body of a comment submission.

    Raises:
        ValidationError: If the body is not JSON or has the wrong shape (400)
    """
    raw = await request.body()
    try:
        payload = json.loads(raw) if raw else {}
    except ValueError as e:
        raise ValidationError("Invalid request: body: malformed JSON.") from e

    try:
        return CreateCommentAPIRequest.model_validate(payload)
    except PayloadValidationError as e:
        errors = [{**error, "loc": ("body", *error["loc"])} for error in e.errors()]
        raise ValidationError(describe_validation_errors(errors)) from e


# Authentication runs before the body is parsed
@router.post(
    "",
    response_model=CreateCommentAPIResponse,
    status_code=status.HTTP_201_CREATED,
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {
                    "schema": CreateCommentAPIRequest.model_json_schema(by_alias=True)
                }
            },
        }
    },
)
async def create_comment(
    request: Request,
    authenticate_use_case: FromDishka[AuthenticateCallerUseCase],
    create_comment_use_case: FromDishka[CreateCommentUseCase],
) -> CreateCommentAPIResponse:
    """Post a comment as the authenticated caller.

    Accepts a bearer token or the session established by Google sign-in.

    Raises:
        AuthenticationRequiredError: No credentials (401)
        InvalidTokenError: Bad or expired bearer token (403)
        ValidationError: Missing fields or unknown post (400)
    """
    caller = await authenticate(request, authenticate_use_case)
    body = await read_comment_body(request)
    response = await create_comment_use_case.execute(
        CreateCommentRequest(
            post_id=body.post_id,
            content=body.content,
            author_id=caller.user_id,
        )
    )
    return CreateCommentAPIResponse(message=response.message)
