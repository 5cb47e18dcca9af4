"""Pytest configuration and shared fixtures."""

import pytest
from rest_framework.test import APIClient

from tests.factories import InMemoryStudentRepository, RecordingNoticeService


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def repository() -> InMemoryStudentRepository:
    return InMemoryStudentRepository()


@pytest.fixture
def notices() -> RecordingNoticeService:
    return RecordingNoticeService()
