"""Answer routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, HTTPException, status
from pydantic import BaseModel, ConfigDict, Field

from stackit.application.projection import AnswerView
from stackit.application.usecase.answer import (
    AcceptAnswerRequest,
    AcceptAnswerUseCase,
    DeleteAnswerRequest,
    DeleteAnswerResponse,
    DeleteAnswerUseCase,
    UpdateAnswerRequest,
    UpdateAnswerUseCase,
)
from stackit.application.usecase.auth import GetCurrentUserUseCase
from stackit.application.usecase.vote import VoteAnswerRequest, VoteAnswerUseCase
from stackit.domain.error import DomainError
from stackit.domain.value import VoteType
from stackit.interface.api.auth import authenticate
from stackit.interface.api.errors import http_error

router = APIRouter(prefix="/answers", tags=["answers"], route_class=DishkaRoute)


class UpdateAnswerAPIRequest(BaseModel):
    """API request for editing an answer."""

    content: str = Field(min_length=1)


class VoteAPIRequest(BaseModel):
    """API request for voting."""

    model_config = ConfigDict(populate_by_name=True)

    vote_type: VoteType = Field(alias="voteType")


@router.put("/{answer_id}", response_model=AnswerView)
async def update_answer(
    answer_id: UUID,
    request: UpdateAnswerAPIRequest,
    update_answer_use_case: FromDishka[UpdateAnswerUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> AnswerView:
    """Edit an answer. Only the owner may edit."""
    user = await authenticate(get_current_user_use_case, authorization, auth_token)

    try:
        return await update_answer_use_case.execute(
            UpdateAnswerRequest(
                answer_id=str(answer_id),
                user_id=user.user_id,
                content=request.content,
            )
        )
    except DomainError as e:
        logfire.warn("Answer update rejected", answer_id=str(answer_id), error=str(e))
        raise http_error(e)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.delete("/{answer_id}", response_model=DeleteAnswerResponse)
async def delete_answer(
    answer_id: UUID,
    delete_answer_use_case: FromDishka[DeleteAnswerUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> DeleteAnswerResponse:
    """Delete an answer. Owner or admin only."""
    user = await authenticate(get_current_user_use_case, authorization, auth_token)

    try:
        return await delete_answer_use_case.execute(
            DeleteAnswerRequest(answer_id=str(answer_id), user_id=user.user_id)
        )
    except DomainError as e:
        logfire.warn("Answer deletion rejected", answer_id=str(answer_id), error=str(e))
        raise http_error(e)


@router.put("/{answer_id}/vote", response_model=AnswerView)
async def vote_answer(
    answer_id: UUID,
    request: VoteAPIRequest,
    vote_answer_use_case: FromDishka[VoteAnswerUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> AnswerView:
    """Upvote or downvote an answer. Repeating the same vote withdraws it."""
    user = await authenticate(get_current_user_use_case, authorization, auth_token)

    try:
        return await vote_answer_use_case.execute(
            VoteAnswerRequest(
                answer_id=str(answer_id),
                user_id=user.user_id,
                vote_type=request.vote_type,
            )
        )
    except DomainError as e:
        logfire.warn("Answer vote failed", answer_id=str(answer_id), error=str(e))
        raise http_error(e)


@router.put("/{answer_id}/accept", response_model=AnswerView)
async def accept_answer(
    answer_id: UUID,
    accept_answer_use_case: FromDishka[AcceptAnswerUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> AnswerView:
    """Accept an answer. Only the question owner may accept.

    Accepting a different answer replaces the previous choice.
    """
    user = await authenticate(get_current_user_use_case, authorization, auth_token)

    try:
        return await accept_answer_use_case.execute(
            AcceptAnswerRequest(answer_id=str(answer_id), user_id=user.user_id)
        )
    except DomainError as e:
        logfire.warn("Answer acceptance rejected", answer_id=str(answer_id), error=str(e))
        raise http_error(e)
