# -*- coding: utf-8 -*-
"""
Rotas FastAPI para o CRUD de Instrutores.
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status

from instrutores_api.database import Store, get_store
from instrutores_api.errors import InvalidIdentifier, NotFound
from instrutores_api.repositories.instrutor_repository import InstrutorRepository
from instrutores_api.schemas.instrutor import InstrutorCreate, InstrutorRead, InstrutorUpdate
from instrutores_api.validators import parse_id

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Instrutores"],
    responses={404: {"description": "Não encontrado"}},
)


def get_repository(store: Store = Depends(get_store)) -> InstrutorRepository:
    return InstrutorRepository(store)


def _instrutor_id(raw: str) -> int:
    try:
        return parse_id(raw)
    except InvalidIdentifier as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)


def _get_or_404(repo: InstrutorRepository, instrutor_id: int) -> InstrutorRead:
    db_instrutor = repo.get_by_id(instrutor_id)
    if db_instrutor is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Instrutor não encontrado")
    return db_instrutor


@router.post("", response_model=InstrutorRead, status_code=status.HTTP_201_CREATED)
def create_instrutor(
    instrutor: InstrutorCreate,
    repo: InstrutorRepository = Depends(get_repository),
):
    """
    Cria um novo instrutor.
    """
    return repo.create(instrutor)


@router.get("", response_model=List[InstrutorRead])
def read_instrutores(repo: InstrutorRepository = Depends(get_repository)):
    """
    Lista todos os instrutores.
    """
    return repo.get_all()


@router.get("/{instrutor_id}", response_model=InstrutorRead)
def read_instrutor(instrutor_id: str, repo: InstrutorRepository = Depends(get_repository)):
    """
    Obtém os detalhes de um instrutor específico pelo ID.
    """
    return _get_or_404(repo, _instrutor_id(instrutor_id))


@router.patch("/{instrutor_id}", response_model=InstrutorRead)
def update_part_of_instrutor(
    instrutor_id: str,
    instrutor: InstrutorUpdate,
    repo: InstrutorRepository = Depends(get_repository),
):
    """
    Atualiza parte dos dados de um instrutor e retorna o registro atualizado.
    """
    parsed_id = _instrutor_id(instrutor_id)
    try:
        repo.update_part(parsed_id, instrutor)
    except NotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
    return _get_or_404(repo, parsed_id)


@router.put("/{instrutor_id}", response_model=InstrutorRead)
def update_all_fields_instrutor(
    instrutor_id: str,
    instrutor: InstrutorUpdate,
    repo: InstrutorRepository = Depends(get_repository),
):
    """
    Atualiza todos os campos de um instrutor e retorna o registro atualizado.
    """
    parsed_id = _instrutor_id(instrutor_id)
    repo.update_all(parsed_id, instrutor)

    # O UPDATE de um ID inexistente não falha; a releitura é que detecta
    db_instrutor = _get_or_404(repo, parsed_id)
    logger.info(f"Instrutor #{parsed_id} substituído: {db_instrutor.nome}")
    return db_instrutor


@router.delete("/{instrutor_id}", status_code=status.HTTP_200_OK)
def delete_instrutor(instrutor_id: str, repo: InstrutorRepository = Depends(get_repository)):
    """
    Exclui um instrutor.
    """
    try:
        repo.delete(_instrutor_id(instrutor_id))
    except NotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
    return Response(status_code=status.HTTP_200_OK)
