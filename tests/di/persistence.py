"""Mock persistence providers for testing."""

from dishka import Scope, provide

from stackit.domain.repository import (
    AnswerRepository,
    NotificationRepository,
    QuestionRepository,
    UserRepository,
)
from stackit.persistence.repository.inmemory import (
    InMemoryAnswerRepository,
    InMemoryNotificationRepository,
    InMemoryQuestionRepository,
    InMemoryStore,
    InMemoryUserRepository,
)
from stackit.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Repositories are REQUEST-scoped like their Postgres counterparts, but
    share one store per container so later requests see earlier writes.
    Each test builds its own container, which keeps tests isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_store(self) -> InMemoryStore:
        """Provide the container-wide in-memory store."""
        return InMemoryStore()

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, store: InMemoryStore) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_question_repository(self, store: InMemoryStore) -> QuestionRepository:
        """Provide in-memory question repository."""
        return InMemoryQuestionRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_answer_repository(self, store: InMemoryStore) -> AnswerRepository:
        """Provide in-memory answer repository."""
        return InMemoryAnswerRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_notification_repository(
        self, store: InMemoryStore
    ) -> NotificationRepository:
        """Provide in-memory notification repository."""
        return InMemoryNotificationRepository(store)
