# -*- coding: utf-8 -*-
"""
Exceções de negócio da aplicação.

Cada exceção carrega o status HTTP e a mensagem que o handler registrado em
``main.create_app`` devolve no envelope ``{success, message, errors}``.
"""

from typing import Any, Dict, List, Optional


class AppError(Exception):
    status_code = 500
    message = "Erro interno do servidor"

    def __init__(self, message: Optional[str] = None, errors: Optional[List[Dict[str, Any]]] = None):
        self.message = message or self.message
        self.errors = errors
        super().__init__(self.message)


class DataValidationError(AppError):
    """Campos ausentes ou em formato inválido."""
    status_code = 400
    message = "Dados inválidos"


class ConflictError(AppError):
    """E-mail duplicado ou horário já ocupado."""
    status_code = 400


class ReferentialError(AppError):
    """Cliente/serviço inexistente ou serviço inativo."""
    status_code = 400


class InvalidTransitionError(AppError):
    status_code = 400


class NotFoundError(AppError):
    status_code = 404
    message = "Registro não encontrado"


class AuthError(AppError):
    status_code = 401
    message = "Usuário ou senha inválidos"
