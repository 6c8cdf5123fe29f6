"""
Unit tests for api/deps.py dependency providers.

These tests verify that the dependency providers are properly wired and
return the correct types. Uses mocks for external dependencies.
"""

import pytest
from unittest.mock import Mock, patch

from fastapi import HTTPException

from api.deps import (
    _build_plan_generator,
    get_exercise_log_repo,
    get_generate_plan_use_case,
    get_plan_generator,
    get_plan_repo,
    get_session_store,
    get_settings,
    get_supabase_client,
    get_supabase_client_required,
    get_swap_exercise_use_case,
    get_user_profile_repo,
    get_weekly_plans_use_case,
)
from api.session_store import InMemorySessionStore
from application.use_cases import (
    GeneratePlanUseCase,
    ListWeeklyPlansUseCase,
    SwapExerciseUseCase,
)
from backend.services.llm import OpenAIWorkoutGenerator
from backend.settings import Settings
from infrastructure import (
    SupabaseExerciseLogRepository,
    SupabasePlanRepository,
    SupabaseUserProfileRepository,
)
from tests.fakes import FakePlanRepository, FakeUserProfileRepository, FakeWorkoutGenerator

# All tests in this module are pure logic tests with mocks - mark as unit
pytestmark = pytest.mark.unit


# =============================================================================
# Settings Provider Tests
# =============================================================================


class TestSettingsProvider:
    """Test get_settings provider."""

    def test_returns_cached_settings_instance(self):
        settings = get_settings()
        assert isinstance(settings, Settings)
        assert get_settings() is settings


# =============================================================================
# Supabase Client Provider Tests
# =============================================================================


class TestSupabaseClientProvider:
    """Test get_supabase_client provider."""

    def setup_method(self):
        get_supabase_client.cache_clear()

    def teardown_method(self):
        get_supabase_client.cache_clear()

    def test_returns_none_when_not_configured(self):
        with patch("api.deps._get_settings") as mock_settings:
            mock_settings.return_value = Mock(supabase_url=None, supabase_key=None)
            assert get_supabase_client() is None

    def test_creates_client_when_configured(self):
        with patch("api.deps._get_settings") as mock_settings:
            mock_settings.return_value = Mock(
                supabase_url="https://test.supabase.co",
                supabase_key="test-key",
            )
            with patch("api.deps.create_client") as mock_create:
                mock_create.return_value = Mock()
                assert get_supabase_client() is not None
                mock_create.assert_called_once_with("https://test.supabase.co", "test-key")

    def test_required_raises_503_when_not_configured(self):
        with patch("api.deps.get_supabase_client", return_value=None):
            with pytest.raises(HTTPException) as exc_info:
                get_supabase_client_required()
        assert exc_info.value.status_code == 503
        assert "Database not available" in exc_info.value.detail

    def test_required_returns_client(self):
        mock_client = Mock()
        with patch("api.deps.get_supabase_client", return_value=mock_client):
            assert get_supabase_client_required() is mock_client


# =============================================================================
# Repository Provider Tests
# =============================================================================


class TestRepositoryProviders:
    """Test repository provider functions."""

    @pytest.mark.parametrize("provider,expected", [
        (get_plan_repo, SupabasePlanRepository),
        (get_exercise_log_repo, SupabaseExerciseLogRepository),
        (get_user_profile_repo, SupabaseUserProfileRepository),
    ])
    def test_returns_supabase_repository(self, provider, expected):
        mock_client = Mock()
        repo = provider(mock_client)
        assert isinstance(repo, expected)
        assert repo._client is mock_client


# =============================================================================
# Service Provider Tests
# =============================================================================


class TestServiceProviders:
    """Test generator, session store and use case providers."""

    def setup_method(self):
        _build_plan_generator.cache_clear()

    def teardown_method(self):
        _build_plan_generator.cache_clear()

    def test_generator_serves_mock_plans_without_key(self):
        with patch("api.deps._get_settings") as mock_settings:
            mock_settings.return_value = Settings(openai_api_key=None, _env_file=None)
            generator = get_plan_generator()

        assert isinstance(generator, OpenAIWorkoutGenerator)
        assert generator.enabled is False

    def test_generator_uses_client_factory_with_key(self):
        settings = Settings(openai_api_key="sk-test", _env_file=None)
        with patch("api.deps._get_settings", return_value=settings):
            with patch("api.deps.AIClientFactory.create_openai_client") as mock_factory:
                generator = get_plan_generator()

        mock_factory.assert_called_once_with(settings)
        assert generator.enabled is True

    def test_session_store_is_shared(self):
        store = get_session_store()
        assert isinstance(store, InMemorySessionStore)
        assert get_session_store() is store

    def test_use_case_providers(self):
        plans = FakePlanRepository()
        generator = FakeWorkoutGenerator()

        assert isinstance(
            get_generate_plan_use_case(plans, FakeUserProfileRepository(), generator),
            GeneratePlanUseCase,
        )
        assert isinstance(get_weekly_plans_use_case(plans), ListWeeklyPlansUseCase)
        assert isinstance(get_swap_exercise_use_case(plans, generator), SwapExerciseUseCase)
