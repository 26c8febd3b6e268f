"""Vote use cases."""

from .vote_answer import VoteAnswerRequest, VoteAnswerUseCase
from .vote_question import VoteQuestionRequest, VoteQuestionUseCase

__all__ = [
    "VoteAnswerRequest",
    "VoteAnswerUseCase",
    "VoteQuestionRequest",
    "VoteQuestionUseCase",
]
