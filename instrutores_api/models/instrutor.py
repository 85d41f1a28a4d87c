# -*- coding: utf-8 -*-
"""
Modelo SQLAlchemy para a entidade Instrutor.

Usado apenas para criar a tabela; o acesso aos dados passa pelo
InstrutorRepository com SQL parametrizado.
"""

from sqlalchemy import Boolean, Column, Date, Integer, String
from instrutores_api.database import Base


class Instrutor(Base):
    __tablename__ = 'instrutores'

    id = Column(Integer, primary_key=True, index=True)
    nome = Column(String(100), nullable=True)
    data_nascimento = Column(Date, nullable=True)
    cpf = Column(String(14), nullable=True)
    telefone = Column(String(20), nullable=True)
    sexo = Column(String(20), nullable=True)
    email = Column(String(100), nullable=True)
    especialidade = Column(String(100), nullable=True)
    experiencia = Column(Integer, nullable=True)  # Anos de experiência
    ativo = Column(Boolean, nullable=True)
