"""Unit tests for provider selection and the test container."""

import pytest

from threadline.domain.repository import KeyValueStore
from threadline.persistence.keyvalue import InMemoryKeyValueStore
from threadline.util.di import (
    PROVIDERS,
    BackendProvider,
    PersistenceProvider,
    ProdConfigProvider,
    ProdPersistenceProvider,
    StorageProvider,
    get_provider,
)
from threadline.util.di.container import create_container
from tests.di import (
    MockBackendProvider,
    MockPersistenceProvider,
    MockStorageProvider,
    build_test_container,
)


class TestGetProvider:
    """Tests for get_provider."""

    def test_concrete_provider_returned_as_is(self):
        assert get_provider(ProdConfigProvider) is ProdConfigProvider
        assert get_provider(ProdConfigProvider, use_mock=True) is ProdConfigProvider

    def test_mockable_component_selects_by_flag(self):
        assert get_provider(PersistenceProvider) is ProdPersistenceProvider
        assert get_provider(PersistenceProvider, use_mock=True) is MockPersistenceProvider
        assert get_provider(BackendProvider, use_mock=True) is MockBackendProvider
        assert get_provider(StorageProvider, use_mock=True) is MockStorageProvider

    def test_every_component_listed(self):
        components = {
            p.__mock_component__ for p in PROVIDERS if p.__mock_component__
        }

        assert components == {"persistence", "backend", "storage"}


class TestBuildTestContainer:
    """Tests for build_test_container."""

    def test_unknown_component_rejected(self):
        with pytest.raises(ValueError, match="Unknown components"):
            build_test_container(unmock={"mailer"})

    @pytest.mark.asyncio
    async def test_mock_storage_is_in_memory(self):
        """The mocked storage component should hand out an in-memory store."""
        container = build_test_container()
        try:
            store = await container.get(KeyValueStore)

            store.set("comment_save_info", "true")

            assert isinstance(store, InMemoryKeyValueStore)
            assert store.keys() == {"comment_save_info"}
        finally:
            await container.close()


class TestCreateContainer:
    """Tests for the production container."""

    @pytest.mark.asyncio
    async def test_builds_with_production_providers(self):
        """The production graph should wire up without resolving anything."""
        container = create_container()

        await container.close()
