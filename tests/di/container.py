"""Test container with per-component unmocking."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from deliberate.util.di import PROVIDERS, Component, get_provider, mockable_components


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build a container for tests.

    Mockable components use their in-memory implementation unless named in
    ``unmock``. Settings still come from the environment, so tests can steer
    them with ``monkeypatch.setenv``.

    Args:
        unmock: Components that should use their production implementation

    Returns:
        Container usable directly or behind a FastAPI ``TestClient``

    Raises:
        ValueError: If ``unmock`` names an unknown component

    Examples:
        container = build_test_container()                        # unit, e2e
        container = build_test_container(unmock={"persistence"})  # integration
    """
    unmock = unmock or set()
    unknown = unmock - mockable_components()
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")

    providers = [
        get_provider(
            base,
            use_mock=(
                base.__mock_component__ is not None
                and base.__mock_component__ not in unmock
            ),
        )()
        for base in PROVIDERS
    ]
    return make_async_container(*providers, FastapiProvider())
