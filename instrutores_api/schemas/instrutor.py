# -*- coding: utf-8 -*-
"""
Schemas Pydantic para a entidade Instrutor.
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# Schema base para Instrutor
class InstrutorBase(BaseModel):
    # Aceita tanto "dataNascimento" (JSON da API) quanto "data_nascimento"
    model_config = ConfigDict(populate_by_name=True)

    nome: Optional[str] = None
    data_nascimento: Optional[date] = Field(None, alias="dataNascimento")
    cpf: Optional[str] = None
    telefone: Optional[str] = None
    sexo: Optional[str] = None
    email: Optional[str] = None  # Sem validação de formato
    especialidade: Optional[str] = None
    experiencia: Optional[int] = None
    ativo: Optional[bool] = None


# Schema para criação e atualização de Instrutor (PUT e PATCH usam o mesmo corpo)
class InstrutorCreate(InstrutorBase):
    pass


class InstrutorUpdate(InstrutorBase):
    pass


# Schema para leitura/retorno de Instrutor
class InstrutorRead(InstrutorBase):
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: int
