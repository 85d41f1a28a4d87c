# -*- coding: utf-8 -*-
"""
Configuração do banco de dados para a API de Instrutores.

O repositório não fala com o SQLAlchemy diretamente: ele recebe um ``Store``,
que só sabe executar SQL parametrizado (``one`` e ``query``). A implementação
de produção é o ``SQLAlchemyStore`` sobre a engine abaixo; os testes usam a
mesma classe sobre um SQLite em memória.
"""

import logging
import re
from pathlib import Path
from typing import Any, Dict, List, Mapping, Protocol, Sequence

from sqlalchemy import bindparam, create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError
from sqlalchemy.ext.declarative import declarative_base

from instrutores_api.config import Config
from instrutores_api.errors import StoreError

logger = logging.getLogger(__name__)

Row = Mapping[str, Any]

# Placeholders posicionais no estilo $1, $2, ... $n
_PLACEHOLDER = re.compile(r"\$(\d+)")


class Store(Protocol):
    """Contrato mínimo de acesso ao banco consumido pelos repositórios."""

    def one(self, sql: str, params: Sequence[Any] = ()) -> Row: ...

    def query(self, sql: str, params: Sequence[Any] = ()) -> List[Row]: ...


def _bind_positional(sql: str, params: Sequence[Any]):
    """
    Converte ``$n`` em ``:pn`` para o ``text()`` do SQLAlchemy.

    O tipo de cada parâmetro é inferido do valor (date, bool, ...), assim o
    dialeto faz a conversão adequada ao banco.
    """
    statement = text(_PLACEHOLDER.sub(r":p\1", sql))
    binds = [bindparam(f"p{i}", value) for i, value in enumerate(params, start=1)]
    return statement.bindparams(*binds) if binds else statement


class SQLAlchemyStore:
    """Store sobre uma Engine SQLAlchemy. Cada chamada roda na sua própria transação."""

    def __init__(self, engine: Engine):
        self.engine = engine

    def one(self, sql: str, params: Sequence[Any] = ()) -> Row:
        """Executa o SQL e exige exatamente uma linha (ex.: INSERT ... RETURNING id)."""
        statement = _bind_positional(sql, params)
        try:
            with self.engine.begin() as conn:
                return dict(conn.execute(statement).mappings().one())
        except (SQLAlchemyError, OverflowError, ValueError, TypeError) as e:
            raise self._store_error(e, "one") from e

    def query(self, sql: str, params: Sequence[Any] = ()) -> List[Row]:
        """Executa o SQL e devolve zero ou mais linhas (lista vazia para UPDATE/DELETE)."""
        statement = _bind_positional(sql, params)
        try:
            with self.engine.begin() as conn:
                result = conn.execute(statement)
                if not result.returns_rows:
                    return []
                return [dict(row) for row in result.mappings()]
        except (SQLAlchemyError, OverflowError, ValueError, TypeError) as e:
            raise self._store_error(e, "query") from e

    @staticmethod
    def _store_error(error: Exception, operation: str) -> StoreError:
        if isinstance(error, IntegrityError):
            logger.error(f"Erro de integridade no banco: {error}")
            return StoreError("Violação de restrição no banco de dados", operation)
        if isinstance(error, OperationalError):
            logger.error(f"Erro de conexão/operação no banco: {error}")
            return StoreError("Erro de conexão com o banco de dados", operation)
        if not isinstance(error, SQLAlchemyError):
            # Valor recusado pelo driver ao converter o parâmetro (ex.: inteiro grande demais)
            logger.error(f"Parâmetro rejeitado pelo banco: {error!r}")
            return StoreError("Parâmetro inválido para o banco de dados", operation)
        logger.error(f"Erro no banco de dados: {error}")
        return StoreError("Falha na operação com o banco de dados", operation)


def build_engine(database_url: str) -> Engine:
    # Configuração de argumentos de conexão
    connect_args: Dict[str, Any] = {}
    if database_url.startswith("sqlite"):
        connect_args = {"check_same_thread": False}
        _ensure_sqlite_dir(database_url)

    # pool_pre_ping evita o erro de conexão SSL fechada; pool_recycle recicla a cada hora
    return create_engine(
        database_url,
        connect_args=connect_args,
        pool_pre_ping=True,
        pool_recycle=3600,
    )


def _ensure_sqlite_dir(database_url: str) -> None:
    path = database_url.split("///", 1)[-1] if "///" in database_url else ""
    if path and path != ":memory:":
        Path(path).parent.mkdir(parents=True, exist_ok=True)


engine = build_engine(Config.DATABASE_URL)

# Base dos modelos declarativos (usada apenas para criar o schema)
Base = declarative_base()

store = SQLAlchemyStore(engine)


# Função para obter o store do banco de dados (usada com Depends)
def get_store() -> Store:
    return store
