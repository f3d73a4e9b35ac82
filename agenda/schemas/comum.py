# -*- coding: utf-8 -*-
"""
Validadores compartilhados pelos schemas Pydantic.
"""

HORA_REGEX = r"^([01]\d|2[0-3]):[0-5]\d$"


def vazio_para_none(v):
    """Converte strings vazias para None antes da validação principal."""
    if isinstance(v, str) and v.strip() == '':
        return None
    return v


def nao_nulo(v):
    """Campos obrigatórios podem ser omitidos no update, mas não enviados como null."""
    if v is None:
        raise ValueError("Campo obrigatório não pode ser nulo")
    return v
