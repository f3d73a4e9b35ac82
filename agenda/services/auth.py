# -*- coding: utf-8 -*-
"""
Autenticação por usuário e senha.

As senhas são comparadas em texto puro, por igualdade exata.
"""
import logging

from agenda.errors import AuthError
from agenda.schemas.usuario import UsuarioCreate, UsuarioRead

logger = logging.getLogger(__name__)


def authenticate(storage, username: str, password: str) -> UsuarioRead:
    user = storage.users.find_by_username(username)
    # Mesma mensagem para usuário inexistente e senha errada
    if user is None or user.password != password:
        logger.warning("Falha de login para o usuário %r", username)
        raise AuthError()
    return UsuarioRead(id=user.id, username=user.username)


def create_user(storage, dados: UsuarioCreate) -> UsuarioRead:
    user = storage.users.create(dados.model_dump())
    return UsuarioRead(id=user.id, username=user.username)
