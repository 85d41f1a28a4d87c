# -*- coding: utf-8 -*-
"""
Exceções da API de Instrutores.

Cada erro carrega a mensagem exibida ao cliente e o status HTTP sugerido;
a tradução para resposta fica a cargo das rotas e do handler global.
"""


class InstrutorError(Exception):
    """Base para todos os erros da API de instrutores."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidIdentifier(InstrutorError):
    """ID de rota ausente ou não numérico."""

    status_code = 400


class NotFound(InstrutorError):
    """A operação exigia um instrutor existente e nenhum foi encontrado."""

    status_code = 404

    def __init__(self, message: str = "Instrutor não encontrado"):
        super().__init__(message)


class StoreError(InstrutorError):
    """Falha do banco de dados (conexão, constraint, SQL inválido)."""

    status_code = 500

    def __init__(self, message: str, operation: str = "query"):
        super().__init__(message)
        self.operation = operation
