# -*- coding: utf-8 -*-
"""
Configuração da API de Instrutores, lida de variáveis de ambiente (.env suportado).
"""

import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    # Usa variável de ambiente ou default para SQLite
    DATABASE_URL = os.environ.get("DATABASE_URL", "sqlite:///./database/instrutores.db")

    ENVIRONMENT = os.getenv("ENVIRONMENT", "development")
    FRONTEND_URL = os.getenv("FRONTEND_URL", "http://localhost:5700")

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
    LOG_FILE = os.getenv("LOG_FILE", "app.log")

    # URLs postgres:// são reescritas para o prefixo postgresql:// aceito pelo SQLAlchemy
    if DATABASE_URL.startswith("postgres://"):
        DATABASE_URL = DATABASE_URL.replace("postgres://", "postgresql://", 1)

    @classmethod
    def is_production(cls) -> bool:
        return cls.ENVIRONMENT == "production"
