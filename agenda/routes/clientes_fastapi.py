# -*- coding: utf-8 -*-
"""
Rotas FastAPI para o CRUD de Clientes.
"""

from typing import List
from fastapi import APIRouter, Depends, status

from agenda.database import get_storage
from agenda.errors import NotFoundError
from agenda.schemas.cliente import ClienteCreate, ClienteRead, ClienteUpdate
from agenda.services import clientes

router = APIRouter(
    tags=["Clientes"],
    responses={404: {"description": "Cliente não encontrado"}},
)


@router.get("", response_model=List[ClienteRead])
def read_clientes(storage=Depends(get_storage)):
    return storage.clients.list()


@router.post("", status_code=status.HTTP_201_CREATED)
def create_cliente(cliente: ClienteCreate, storage=Depends(get_storage)):
    """
    Cadastra um novo cliente. O e-mail não pode pertencer a outro cliente.
    """
    db_cliente = clientes.create_cliente(storage, cliente)
    return {
        "success": True,
        "client": db_cliente.model_dump(),
        "message": "Cliente cadastrado com sucesso",
    }


@router.get("/{cliente_id}", response_model=ClienteRead)
def read_cliente(cliente_id: str, storage=Depends(get_storage)):
    db_cliente = storage.clients.get(cliente_id)
    if db_cliente is None:
        raise NotFoundError(clientes.NAO_ENCONTRADO)
    return db_cliente


@router.put("/{cliente_id}")
def update_cliente(cliente_id: str, cliente_update: ClienteUpdate, storage=Depends(get_storage)):
    """
    Atualiza apenas os campos enviados.
    """
    db_cliente = clientes.update_cliente(storage, cliente_id, cliente_update)
    return {
        "success": True,
        "client": db_cliente.model_dump(),
        "message": "Cliente atualizado com sucesso",
    }


@router.delete("/{cliente_id}")
def delete_cliente(cliente_id: str, storage=Depends(get_storage)):
    if not storage.clients.delete(cliente_id):
        raise NotFoundError(clientes.NAO_ENCONTRADO)
    return {"success": True, "message": "Cliente excluído com sucesso"}
