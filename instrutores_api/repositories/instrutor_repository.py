# -*- coding: utf-8 -*-
"""
Camada de acesso a dados dos instrutores.
Todo o SQL da tabela `instrutores` fica aqui.
"""

import logging
from typing import Any, List, Optional

from instrutores_api.database import Row, Store
from instrutores_api.errors import NotFound
from instrutores_api.schemas.instrutor import InstrutorBase, InstrutorRead

logger = logging.getLogger(__name__)

# Ordem dos campos nos INSERT/UPDATE (o id fica de fora)
CAMPOS = (
    "nome",
    "data_nascimento",
    "cpf",
    "telefone",
    "sexo",
    "email",
    "especialidade",
    "experiencia",
    "ativo",
)

SELECT_INSTRUTORES = """
    SELECT id, nome, data_nascimento, cpf,
           telefone, sexo, email, especialidade,
           experiencia, ativo
    FROM instrutores
"""


class InstrutorRepository:
    """Repositório de CRUD sobre a tabela instrutores."""

    def __init__(self, store: Store):
        self.store = store

    # ── CREATE ────────────────────────────────────────────

    def create(self, instrutor: InstrutorBase) -> InstrutorRead:
        """
        Insere um novo instrutor.

        Não verifica duplicidade de CPF ou e-mail.

        Returns:
            O mesmo instrutor com o `id` gerado pelo banco.
        """
        sql = """
            INSERT INTO instrutores (nome, data_nascimento, cpf,
                telefone, sexo, email, especialidade, experiencia, ativo)
            VALUES ($1, $2, $3, $4, $5, $6, $7, $8, $9)
            RETURNING id;
        """
        result = self.store.one(sql, self._params(instrutor))
        logger.info(f"Instrutor #{result['id']} criado: {instrutor.nome}")
        return InstrutorRead(id=result["id"], **instrutor.model_dump())

    # ── READ ──────────────────────────────────────────────

    def get_all(self) -> List[InstrutorRead]:
        """Lista todos os instrutores, na ordem devolvida pelo banco."""
        rows = self.store.query(SELECT_INSTRUTORES, [])
        return [self._row_to_instrutor(r) for r in rows]

    def get_by_id(self, instrutor_id: int) -> Optional[InstrutorRead]:
        """Busca um instrutor pelo ID. Retorna None se não existir."""
        rows = self.store.query(SELECT_INSTRUTORES + " WHERE id = $1", [instrutor_id])
        if not rows:
            return None
        return self._row_to_instrutor(rows[0])

    # ── UPDATE ────────────────────────────────────────────

    def update_all(self, instrutor_id: int, instrutor: InstrutorBase) -> None:
        """
        Sobrescreve todos os campos do instrutor.

        Um ID inexistente resulta em um UPDATE que não afeta linhas, sem erro.
        """
        sql = """
            UPDATE instrutores SET
                nome = $1,
                data_nascimento = $2,
                cpf = $3,
                telefone = $4,
                sexo = $5,
                email = $6,
                especialidade = $7,
                experiencia = $8,
                ativo = $9
            WHERE id = $10
        """
        self.store.query(sql, self._params(instrutor) + [instrutor_id])
        logger.info(f"Instrutor #{instrutor_id} atualizado")

    def update_part(self, instrutor_id: int, instrutor: InstrutorBase) -> None:
        """
        Atualização parcial: compara cada campo com o valor salvo.

        Campos ausentes no corpo chegam como None e também sobrescrevem o
        valor salvo.

        Raises:
            NotFound: se o instrutor não existir.
        """
        saved = self.get_by_id(instrutor_id)
        if saved is None:
            raise NotFound()

        merged = {}
        for campo in CAMPOS:
            salvo = getattr(saved, campo)
            novo = getattr(instrutor, campo)
            merged[campo] = novo if salvo != novo else salvo

        self.update_all(instrutor_id, InstrutorBase(**merged))

    # ── DELETE ────────────────────────────────────────────

    def delete(self, instrutor_id: int) -> None:
        """
        Exclui um instrutor.

        Raises:
            NotFound: se o instrutor não existir (inclusive numa segunda exclusão).
        """
        if self.get_by_id(instrutor_id) is None:
            raise NotFound()

        self.store.query("DELETE FROM instrutores WHERE id = $1", [instrutor_id])
        logger.info(f"Instrutor #{instrutor_id} excluído")

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _params(instrutor: InstrutorBase) -> List[Any]:
        return [getattr(instrutor, campo) for campo in CAMPOS]

    @staticmethod
    def _row_to_instrutor(row: Row) -> InstrutorRead:
        """Converte uma linha do banco em InstrutorRead."""
        return InstrutorRead(
            id=row["id"],
            nome=row["nome"],
            data_nascimento=row["data_nascimento"],
            cpf=row["cpf"],
            telefone=row["telefone"],
            sexo=row["sexo"],
            email=row["email"],
            especialidade=row["especialidade"],
            experiencia=row["experiencia"],
            ativo=row["ativo"],
        )
