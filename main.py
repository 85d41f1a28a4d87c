# -*- coding: utf-8 -*-
"""
Arquivo principal da aplicação FastAPI da API de Instrutores.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from instrutores_api.config import Config
from instrutores_api.database import Base, engine
from instrutores_api.errors import InstrutorError
from instrutores_api.models import instrutor  # noqa: F401  registra a tabela no metadata
from instrutores_api.routes import instrutores_fastapi

logging.basicConfig(
    level=Config.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    filename=Config.LOG_FILE
)
logger = logging.getLogger(__name__)

# Cria as tabelas no banco de dados com tratamento de erros
try:
    Base.metadata.create_all(bind=engine)
    logger.info("Tabelas criadas com sucesso!")
except Exception as e:
    logger.error(f"Erro ao criar tabelas: {e}")


# Inicializa a aplicação FastAPI
app = FastAPI(
    title="API Instrutores",
    description="API para gerenciamento de instrutores da academia",
    version="1.0.0",
    docs_url=None if Config.is_production() else "/docs",      # Desativa /docs em produção
    redoc_url=None if Config.is_production() else "/redoc",
    openapi_url=None if Config.is_production() else "/openapi.json"
)

origins = [
    Config.FRONTEND_URL,
    "http://localhost:5700",
    "http://localhost",
    "http://localhost:8080",
    "http://127.0.0.1",
    "http://127.0.0.1:8080",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(InstrutorError)
async def instrutor_error_handler(request: Request, exc: InstrutorError):
    # Detalhes internos ficam só no log
    logger.error(f"Erro - {request.method} {request.url.path}: {exc!r}")
    message = exc.message if exc.status_code < 500 else "Erro interno"
    return JSONResponse(status_code=exc.status_code, content={"detail": message})


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.error(f"Erro - {request.method} {request.url.path}: {exc!r}")
    return JSONResponse(status_code=500, content={"detail": "Erro interno"})


# Montagem dos routers
app.include_router(instrutores_fastapi.router, prefix="/api/v1/instrutores")


@app.get("/", tags=["Root"])
async def root():
    return {
        "mensagem": "API Instrutores - Sistema de Gerenciamento",
        "documentacao": "/docs",
        "endpoints": [
            {"instrutores": "/api/v1/instrutores"},
        ]
    }
