"""List questions use case."""

import math

from pydantic import BaseModel, Field

from stackit.application.projection import QuestionView, ViewBuilder
from stackit.config import ForumSettings
from stackit.domain.service import QuestionService

from stackit.application.usecase.base import BaseUseCase


class ListQuestionsRequest(BaseModel):
    """List questions request."""

    page: int = Field(default=1, ge=1)
    keyword: str | None = None  # Case-insensitive title substring
    tag: str | None = None  # Exact tag


class ListQuestionsResponse(BaseModel):
    """List questions response."""

    questions: list[QuestionView]
    page: int
    pages: int


class ListQuestionsUseCase(BaseUseCase):
    """Use case for browsing questions newest first."""

    def __init__(
        self,
        question_service: QuestionService,
        view_builder: ViewBuilder,
        forum_settings: ForumSettings,
    ) -> None:
        self.question_service = question_service
        self.view_builder = view_builder
        self.page_size = forum_settings.page_size

    async def execute(self, request: ListQuestionsRequest) -> ListQuestionsResponse:
        """List one page of questions.

        Blank keyword or tag filters are ignored.
        """
        keyword = (request.keyword or "").strip() or None
        tag = (request.tag or "").strip() or None

        questions, total = await self.question_service.list_questions(
            keyword=keyword, tag=tag, page=request.page, page_size=self.page_size
        )

        return ListQuestionsResponse(
            questions=await self.view_builder.questions(questions),
            page=request.page,
            pages=math.ceil(total / self.page_size),
        )
