# -*- coding: utf-8 -*-
"""
Regras de negócio de clientes: o e-mail é único entre todos os clientes.
"""
import logging

from agenda.errors import ConflictError, NotFoundError
from agenda.schemas.cliente import ClienteCreate, ClienteRead, ClienteUpdate

logger = logging.getLogger(__name__)

EMAIL_DUPLICADO = "E-mail já cadastrado no sistema"
NAO_ENCONTRADO = "Cliente não encontrado"


def create_cliente(storage, cliente: ClienteCreate) -> ClienteRead:
    with storage.lock:
        if storage.clients.find_by_email(cliente.email) is not None:
            logger.warning("Cadastro recusado: e-mail %s já existe", cliente.email)
            raise ConflictError(EMAIL_DUPLICADO)
        db_cliente = storage.clients.create(cliente.model_dump())
    logger.info("Cliente %s cadastrado", db_cliente.id)
    return db_cliente


def update_cliente(storage, cliente_id: str, cliente_update: ClienteUpdate) -> ClienteRead:
    update_data = cliente_update.model_dump(exclude_unset=True)
    with storage.lock:
        if "email" in update_data:
            existente = storage.clients.find_by_email(update_data["email"])
            if existente is not None and existente.id != cliente_id:
                raise ConflictError(EMAIL_DUPLICADO)
        db_cliente = storage.clients.update(cliente_id, update_data)
    if db_cliente is None:
        raise NotFoundError(NAO_ENCONTRADO)
    return db_cliente
