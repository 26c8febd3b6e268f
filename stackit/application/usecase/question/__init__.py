"""Question use cases."""

from .create_question import CreateQuestionRequest, CreateQuestionUseCase
from .delete_question import (
    DeleteQuestionRequest,
    DeleteQuestionResponse,
    DeleteQuestionUseCase,
)
from .get_question import GetQuestionRequest, GetQuestionUseCase
from .list_questions import (
    ListQuestionsRequest,
    ListQuestionsResponse,
    ListQuestionsUseCase,
)
from .update_question import UpdateQuestionRequest, UpdateQuestionUseCase

__all__ = [
    "CreateQuestionRequest",
    "CreateQuestionUseCase",
    "DeleteQuestionRequest",
    "DeleteQuestionResponse",
    "DeleteQuestionUseCase",
    "GetQuestionRequest",
    "GetQuestionUseCase",
    "ListQuestionsRequest",
    "ListQuestionsResponse",
    "ListQuestionsUseCase",
    "UpdateQuestionRequest",
    "UpdateQuestionUseCase",
]
