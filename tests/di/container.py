"""Test container builder with selective unmocking."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from stackit.util.di import PROVIDERS, Component, get_provider


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build test container with selective unmocking.

    Settings are loaded from environment variables.

    Args:
        unmock: Components to use production implementations for.
                All others use mocks if available.

    Returns:
        Configured test container

    Raises:
        ValueError: If unknown components are requested

    Examples:
        # Unit and API tests - in-memory persistence
        container = build_test_container()

        # Integration tests - real PostgreSQL
        container = build_test_container(unmock={"persistence"})
    """
    unmock = unmock or set()
    _validate_unmock(unmock)

    provider_instances = []
    for base in PROVIDERS:
        if not base.__subclasses__():
            # Concrete provider - always use as-is
            provider_class = get_provider(base, use_mock=False)
        else:
            component_name = getattr(base, "__mock_component__", None)
            use_mock = component_name not in unmock if component_name else False
            provider_class = get_provider(base, use_mock=use_mock)

        provider_instances.append(provider_class())

    # Lets the same container back a FastAPI app in API tests
    return make_async_container(*provider_instances, FastapiProvider())


def _validate_unmock(unmock: set[Component]) -> None:
    """Validate unmock configuration.

    Raises:
        ValueError: If unknown components are requested
    """
    all_components = {
        getattr(p, "__mock_component__")
        for p in PROVIDERS
        if p.__subclasses__() and hasattr(p, "__mock_component__")
    }

    unknown = unmock - all_components
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")
