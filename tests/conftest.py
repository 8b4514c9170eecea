"""Shared fixtures: a fresh application and store for every test."""

import asyncio

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from user_registry_api.app.core.config import Settings
from user_registry_api.app.main import create_app
from user_registry_api.app.services.user_service import UserService
from user_registry_api.app.services.user_store import UserStore


@pytest.fixture
def store() -> UserStore:
    return UserStore()


@pytest.fixture
def service(store: UserStore) -> UserService:
    return UserService(store)


@pytest.fixture
def settings() -> Settings:
    return Settings(cors_origins="*", api_prefix="")


@pytest.fixture
def app(settings: Settings, store: UserStore) -> FastAPI:
    return create_app(settings=settings, store=store)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)


@pytest.fixture
def run():
    """Run a service coroutine to completion."""
    return asyncio.run
