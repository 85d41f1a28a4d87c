"""Configuração compartilhada dos testes: SQLite em memória por teste."""

import os

# Nunca apontar os testes para o banco real
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("LOG_FILE", "test.log")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from instrutores_api.database import Base, SQLAlchemyStore, get_store
from instrutores_api.errors import StoreError
from instrutores_api.models import instrutor  # noqa: F401
from instrutores_api.repositories.instrutor_repository import InstrutorRepository


class FailingStore:
    """Store que sempre falha, simulando queda do banco."""

    def __init__(self):
        self.calls = []

    def one(self, sql, params=()):
        self.calls.append(("one", sql, list(params)))
        raise StoreError("Erro de conexão com o banco de dados", "one")

    def query(self, sql, params=()):
        self.calls.append(("query", sql, list(params)))
        raise StoreError("Erro de conexão com o banco de dados", "query")


class CrashingStore:
    """Store que falha com um erro não classificado pela API."""

    def one(self, sql, params=()):
        raise RuntimeError("falha inesperada")

    def query(self, sql, params=()):
        raise RuntimeError("falha inesperada")


@pytest.fixture
def test_engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def store(test_engine):
    return SQLAlchemyStore(test_engine)


@pytest.fixture
def repo(store):
    return InstrutorRepository(store)


@pytest.fixture
def failing_store():
    return FailingStore()


def _client_for(store):
    from main import app

    app.dependency_overrides[get_store] = lambda: store
    return app


@pytest.fixture
def client(store):
    app = _client_for(store)
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def broken_client(failing_store):
    app = _client_for(failing_store)
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def crashing_client():
    app = _client_for(CrashingStore())
    # Deixa o handler global responder em vez de propagar a exceção no teste
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c
    app.dependency_overrides.clear()
