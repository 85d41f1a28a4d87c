# -*- coding: utf-8 -*-
"""
Validação dos parâmetros de rota da API de Instrutores.
"""

import re
from typing import Optional

from instrutores_api.errors import InvalidIdentifier

# O ID inteiro precisa casar: "12abc" e "1.5" são recusados, não truncados
_INTEIRO = re.compile(r"[-+]?\d+")


def parse_id(raw: Optional[str]) -> int:
    """
    Converte o ID recebido na rota para inteiro.

    Aceita qualquer representação de inteiro, inclusive negativos.
    Lança InvalidIdentifier se o ID estiver vazio ou não for numérico.
    """
    if raw is None or not raw.strip():
        raise InvalidIdentifier("Informe o ID do instrutor")
    if not _INTEIRO.fullmatch(raw.strip()):
        raise InvalidIdentifier("Informe um ID válido")
    return int(raw)
