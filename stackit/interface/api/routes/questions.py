"""Question routes (including answers nested under a question)."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, HTTPException, Query, status
from pydantic import BaseModel, ConfigDict, Field

from stackit.application.projection import (
    AnswerView,
    QuestionDetailView,
    QuestionView,
)
from stackit.application.usecase.answer import (
    CreateAnswerRequest,
    CreateAnswerUseCase,
    ListAnswersRequest,
    ListAnswersUseCase,
)
from stackit.application.usecase.auth import GetCurrentUserUseCase
from stackit.application.usecase.question import (
    CreateQuestionRequest,
    CreateQuestionUseCase,
    DeleteQuestionRequest,
    DeleteQuestionResponse,
    DeleteQuestionUseCase,
    GetQuestionRequest,
    GetQuestionUseCase,
    ListQuestionsRequest,
    ListQuestionsResponse,
    ListQuestionsUseCase,
    UpdateQuestionRequest,
    UpdateQuestionUseCase,
)
from stackit.application.usecase.vote import VoteQuestionRequest, VoteQuestionUseCase
from stackit.domain.error import DomainError
from stackit.domain.value import VoteType
from stackit.interface.api.auth import authenticate
from stackit.interface.api.errors import http_error

router = APIRouter(prefix="/questions", tags=["questions"], route_class=DishkaRoute)


class CreateQuestionAPIRequest(BaseModel):
    """API request for asking a question."""

    title: str = Field(min_length=1, max_length=300)
    description: str = Field(min_length=1)
    tags: list[str] = Field(default_factory=list)


class UpdateQuestionAPIRequest(BaseModel):
    """API request for editing a question. Omitted fields are unchanged."""

    title: str | None = Field(default=None, min_length=1, max_length=300)
    description: str | None = Field(default=None, min_length=1)
    tags: list[str] | None = None


class VoteAPIRequest(BaseModel):
    """API request for voting."""

    model_config = ConfigDict(populate_by_name=True)

    vote_type: VoteType = Field(alias="voteType")


class CreateAnswerAPIRequest(BaseModel):
    """API request for answering a question."""

    content: str = Field(min_length=1)


@router.post("", response_model=QuestionView, status_code=status.HTTP_201_CREATED)
async def create_question(
    request: CreateQuestionAPIRequest,
    create_question_use_case: FromDishka[CreateQuestionUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> QuestionView:
    """Ask a new question.

    Requires authentication.
    """
    user = await authenticate(get_current_user_use_case, authorization, auth_token)

    try:
        return await create_question_use_case.execute(
            CreateQuestionRequest(
                title=request.title,
                description=request.description,
                tags=request.tags,
                user_id=user.user_id,
            )
        )
    except DomainError as e:
        logfire.warn("Question creation domain error", error=str(e))
        raise http_error(e)
    except ValueError as e:
        logfire.warn("Question creation validation error", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("", response_model=ListQuestionsResponse)
async def list_questions(
    list_questions_use_case: FromDishka[ListQuestionsUseCase],
    page: int = Query(default=1, ge=1),
    keyword: str | None = Query(default=None),
    tag: str | None = Query(default=None),
) -> ListQuestionsResponse:
    """List questions newest first, ten per page.

    Args:
        list_questions_use_case: List questions use case from DI
        page: 1-based page number
        keyword: Case-insensitive title filter
        tag: Tag filter

    Example:
        GET /questions?page=2&keyword=python

        Response:
        {"questions": [...], "page": 2, "pages": 3}
    """
    return await list_questions_use_case.execute(
        ListQuestionsRequest(page=page, keyword=keyword, tag=tag)
    )


@router.get("/{question_id}", response_model=QuestionDetailView)
async def get_question(
    question_id: UUID,
    get_question_use_case: FromDishka[GetQuestionUseCase],
) -> QuestionDetailView:
    """Get a question with its answers. Counts as a view."""
    try:
        return await get_question_use_case.execute(
            GetQuestionRequest(question_id=str(question_id))
        )
    except DomainError as e:
        logfire.warn("Question lookup failed", question_id=str(question_id))
        raise http_error(e)


@router.put("/{question_id}", response_model=QuestionView)
async def update_question(
    question_id: UUID,
    request: UpdateQuestionAPIRequest,
    update_question_use_case: FromDishka[UpdateQuestionUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> QuestionView:
    """Edit a question. Only the owner may edit."""
    user = await authenticate(get_current_user_use_case, authorization, auth_token)

    try:
        return await update_question_use_case.execute(
            UpdateQuestionRequest(
                question_id=str(question_id),
                user_id=user.user_id,
                title=request.title,
                description=request.description,
                tags=request.tags,
            )
        )
    except DomainError as e:
        logfire.warn(
            "Question update rejected", question_id=str(question_id), error=str(e)
        )
        raise http_error(e)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.delete("/{question_id}", response_model=DeleteQuestionResponse)
async def delete_question(
    question_id: UUID,
    delete_question_use_case: FromDishka[DeleteQuestionUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> DeleteQuestionResponse:
    """Delete a question and its answers. Owner or admin only."""
    user = await authenticate(get_current_user_use_case, authorization, auth_token)

    try:
        return await delete_question_use_case.execute(
            DeleteQuestionRequest(question_id=str(question_id), user_id=user.user_id)
        )
    except DomainError as e:
        logfire.warn(
            "Question deletion rejected", question_id=str(question_id), error=str(e)
        )
        raise http_error(e)


@router.put("/{question_id}/vote", response_model=QuestionView)
async def vote_question(
    question_id: UUID,
    request: VoteAPIRequest,
    vote_question_use_case: FromDishka[VoteQuestionUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> QuestionView:
    """Upvote or downvote a question. Repeating the same vote withdraws it."""
    user = await authenticate(get_current_user_use_case, authorization, auth_token)

    try:
        return await vote_question_use_case.execute(
            VoteQuestionRequest(
                question_id=str(question_id),
                user_id=user.user_id,
                vote_type=request.vote_type,
            )
        )
    except DomainError as e:
        logfire.warn("Question vote failed", question_id=str(question_id), error=str(e))
        raise http_error(e)


@router.post(
    "/{question_id}/answers",
    response_model=AnswerView,
    status_code=status.HTTP_201_CREATED,
)
async def create_answer(
    question_id: UUID,
    request: CreateAnswerAPIRequest,
    create_answer_use_case: FromDishka[CreateAnswerUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> AnswerView:
    """Answer a question. The question owner is notified."""
    user = await authenticate(get_current_user_use_case, authorization, auth_token)

    try:
        return await create_answer_use_case.execute(
            CreateAnswerRequest(
                question_id=str(question_id),
                user_id=user.user_id,
                content=request.content,
            )
        )
    except DomainError as e:
        logfire.warn("Answer creation failed", question_id=str(question_id), error=str(e))
        raise http_error(e)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("/{question_id}/answers", response_model=list[AnswerView])
async def list_answers(
    question_id: UUID,
    list_answers_use_case: FromDishka[ListAnswersUseCase],
) -> list[AnswerView]:
    """List the answers to a question: accepted first, then by votes, then newest."""
    try:
        result = await list_answers_use_case.execute(
            ListAnswersRequest(question_id=str(question_id))
        )
    except DomainError as e:
        logfire.warn("Listing answers failed", question_id=str(question_id), error=str(e))
        raise http_error(e)
    return result.answers
