# -*- coding: utf-8 -*-
"""
Configuração do SQLAlchemy e dependências injetadas nas rotas FastAPI.
"""

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import StaticPool

# Cria uma Base class
Base = declarative_base()


def build_engine(database_url: str):
    # Se for PostgreSQL no Render, ajusta o prefixo se necessário
    if database_url.startswith("postgres://"):
        database_url = database_url.replace("postgres://", "postgresql://", 1)

    if database_url.startswith("sqlite"):
        connect_args = {"check_same_thread": False}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            # Banco em memória: todas as sessões precisam da mesma conexão
            return create_engine(database_url, connect_args=connect_args, poolclass=StaticPool)
        return create_engine(database_url, connect_args=connect_args)

    return create_engine(database_url, pool_pre_ping=True, pool_recycle=3600)


# Funções para obter o armazenamento e as configurações (usadas com Depends)
def get_storage(request: Request):
    return request.app.state.storage


def get_settings(request: Request):
    return request.app.state.settings
