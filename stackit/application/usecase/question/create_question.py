"""Create question use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from stackit.application.projection import QuestionView, ViewBuilder
from stackit.domain.service import QuestionService
from stackit.domain.value import UserId

from stackit.application.usecase.base import BaseUseCase


class CreateQuestionRequest(BaseModel):
    """Create question request."""

    title: str = Field(min_length=1, max_length=300)
    description: str = Field(min_length=1)
    tags: list[str] = Field(default_factory=list)
    user_id: str  # Authenticated user


class CreateQuestionUseCase(BaseUseCase):
    """Use case for asking a question."""

    def __init__(
        self, question_service: QuestionService, view_builder: ViewBuilder
    ) -> None:
        """Initialize create question use case.

        Args:
            question_service: Question domain service
            view_builder: Response projection
        """
        self.question_service = question_service
        self.view_builder = view_builder

    async def execute(self, request: CreateQuestionRequest) -> QuestionView:
        """Create the question and return it with its owner embedded."""
        question = await self.question_service.create_question(
            user_id=UserId(UUID(request.user_id)),
            title=request.title,
            description=request.description,
            tags=request.tags,
        )
        return await self.view_builder.question(question)
