# -*- coding: utf-8 -*-
"""
Rotas FastAPI para o CRUD de Serviços.
"""

from typing import List
from fastapi import APIRouter, Depends, status

from agenda.database import get_storage
from agenda.errors import NotFoundError
from agenda.schemas.servico import ServicoCreate, ServicoRead, ServicoUpdate

router = APIRouter(
    tags=["Serviços"],
    responses={404: {"description": "Serviço não encontrado"}},
)

NAO_ENCONTRADO = "Serviço não encontrado"


@router.get("", response_model=List[ServicoRead])
def read_servicos(storage=Depends(get_storage)):
    return storage.services.list()


# Declarada antes de /{servico_id} para não ser capturada por ela
@router.get("/active", response_model=List[ServicoRead])
def read_servicos_ativos(storage=Depends(get_storage)):
    """
    Lista somente os serviços disponíveis para novos agendamentos.
    """
    return storage.services.list_active()


@router.post("", status_code=status.HTTP_201_CREATED)
def create_servico(servico: ServicoCreate, storage=Depends(get_storage)):
    db_servico = storage.services.create(servico.model_dump())
    return {
        "success": True,
        "service": db_servico.model_dump(),
        "message": "Serviço cadastrado com sucesso",
    }


@router.get("/{servico_id}", response_model=ServicoRead)
def read_servico(servico_id: str, storage=Depends(get_storage)):
    db_servico = storage.services.get(servico_id)
    if db_servico is None:
        raise NotFoundError(NAO_ENCONTRADO)
    return db_servico


@router.put("/{servico_id}")
def update_servico(servico_id: str, servico_update: ServicoUpdate, storage=Depends(get_storage)):
    db_servico = storage.services.update(servico_id, servico_update.model_dump(exclude_unset=True))
    if db_servico is None:
        raise NotFoundError(NAO_ENCONTRADO)
    return {
        "success": True,
        "service": db_servico.model_dump(),
        "message": "Serviço atualizado com sucesso",
    }


@router.delete("/{servico_id}")
def delete_servico(servico_id: str, storage=Depends(get_storage)):
    """
    Exclui o serviço. Para apenas retirá-lo da agenda, use active=false.
    """
    if not storage.services.delete(servico_id):
        raise NotFoundError(NAO_ENCONTRADO)
    return {"success": True, "message": "Serviço excluído com sucesso"}
