# -*- coding: utf-8 -*-
"""
Rotas FastAPI para o CRUD de Agendamentos.
"""

from datetime import date
from typing import List
from fastapi import APIRouter, Depends, status

from agenda.config import Settings
from agenda.database import get_settings, get_storage
from agenda.errors import NotFoundError
from agenda.schemas.agendamento import AgendamentoCreate, AgendamentoRead, AgendamentoUpdate
from agenda.services import agendamentos

router = APIRouter(
    tags=["Agendamentos"],
    responses={404: {"description": "Agendamento não encontrado"}},
)

NAO_ENCONTRADO = "Agendamento não encontrado"


@router.get("", response_model=List[AgendamentoRead])
def read_agendamentos(storage=Depends(get_storage)):
    return storage.appointments.list()


@router.get("/date/{data}", response_model=List[AgendamentoRead])
def read_agendamentos_por_data(data: date, storage=Depends(get_storage)):
    return storage.appointments.list_by_date(data)


@router.get("/client/{client_id}", response_model=List[AgendamentoRead])
def read_agendamentos_do_cliente(client_id: str, storage=Depends(get_storage)):
    return storage.appointments.list_by_client(client_id)


@router.post("", status_code=status.HTTP_201_CREATED)
def create_agendamento(agendamento: AgendamentoCreate, storage=Depends(get_storage)):
    """
    Cria um agendamento depois de conferir cliente, serviço ativo e horário livre.
    """
    db_agendamento = agendamentos.create_agendamento(storage, agendamento)
    return {
        "success": True,
        "appointment": db_agendamento.model_dump(mode="json"),
        "message": "Agendamento criado com sucesso",
    }


@router.get("/{agendamento_id}", response_model=AgendamentoRead)
def read_agendamento(agendamento_id: str, storage=Depends(get_storage)):
    db_agendamento = storage.appointments.get(agendamento_id)
    if db_agendamento is None:
        raise NotFoundError(NAO_ENCONTRADO)
    return db_agendamento


@router.put("/{agendamento_id}")
def update_agendamento(
    agendamento_id: str,
    agendamento_update: AgendamentoUpdate,
    storage=Depends(get_storage),
    settings: Settings = Depends(get_settings),
):
    db_agendamento = agendamentos.update_agendamento(
        storage,
        agendamento_id,
        agendamento_update,
        enforce_transitions=settings.enforce_status_transitions,
    )
    return {
        "success": True,
        "appointment": db_agendamento.model_dump(mode="json"),
        "message": "Agendamento atualizado com sucesso",
    }


@router.delete("/{agendamento_id}")
def delete_agendamento(agendamento_id: str, storage=Depends(get_storage)):
    if not storage.appointments.delete(agendamento_id):
        raise NotFoundError(NAO_ENCONTRADO)
    return {"success": True, "message": "Agendamento excluído com sucesso"}
