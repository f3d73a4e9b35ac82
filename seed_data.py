# -*- coding: utf-8 -*-
"""
Dados iniciais criados a cada inicialização: o usuário administrador e os
serviços padrão da agenda.
"""
import logging

from agenda.schemas.servico import ServicoCreate
from agenda.schemas.usuario import UsuarioCreate
from agenda.services.auth import create_user

logger = logging.getLogger(__name__)

DEFAULT_SERVICES = [
    ServicoCreate(name="Consulta Geral", description="Atendimento padrão", duration=60, price=150.00),
    ServicoCreate(name="Avaliação", description="Avaliação inicial do cliente", duration=45, price=200.00),
    ServicoCreate(name="Retorno", description="Retorno de acompanhamento", duration=30, price=100.00),
]


def create_first_user(storage, username: str = "admin", password: str = "admin123"):
    # Verifica se o usuário já existe
    if storage.users.find_by_username(username) is not None:
        logger.info("Usuário administrador '%s' já existe.", username)
        return None

    user = create_user(storage, UsuarioCreate(username=username, password=password))
    logger.info("Usuário administrador '%s' criado.", username)
    return user


def create_default_services(storage):
    if storage.services.list():
        return []
    criados = [storage.services.create(servico.model_dump()) for servico in DEFAULT_SERVICES]
    logger.info("%d serviços padrão cadastrados.", len(criados))
    return criados


def seed(storage, settings) -> None:
    create_first_user(storage, settings.admin_username, settings.admin_password)
    if settings.seed_default_services:
        create_default_services(storage)
