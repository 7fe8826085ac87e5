"""
Shared fixtures for the Hello Homer tests.
"""
import copy

import pytest
from django.core.cache import cache

from fakes import SAMPLE_PAYLOAD, FakeCache, FakeClock, FakeOptions, StubClient
from hello_homer.exceptions import HomerConnectionError


@pytest.fixture(autouse=True)
def clear_django_cache():
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def payload():
    return copy.deepcopy(SAMPLE_PAYLOAD)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def fake_cache(clock):
    return FakeCache(clock)


@pytest.fixture
def fake_options():
    return FakeOptions()


@pytest.fixture
def failing_client():
    return StubClient(HomerConnectionError("Connection refused"))
