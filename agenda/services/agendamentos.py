# -*- coding: utf-8 -*-
"""
Regras de negócio de agendamentos.

Antes de gravar, um agendamento precisa apontar para um cliente existente e
para um serviço existente e ativo, e não pode ocupar o mesmo dia e horário de
outro agendamento não cancelado. Verificação e escrita acontecem com o lock do
armazenamento seguro, então nenhuma outra requisição grava no meio do caminho.
"""
import logging
from datetime import date
from typing import Optional

from agenda.errors import ConflictError, InvalidTransitionError, NotFoundError, ReferentialError
from agenda.schemas.agendamento import AgendamentoCreate, AgendamentoRead, AgendamentoUpdate

logger = logging.getLogger(__name__)

CANCELADO = "cancelado"

# pendente -> confirmado -> concluido; cancelado e concluido são finais
TRANSICOES = {
    "pendente": {"confirmado", "cancelado"},
    "confirmado": {"concluido", "cancelado"},
    "concluido": set(),
    "cancelado": set(),
}


def _validar_cliente(storage, client_id: str) -> None:
    if storage.clients.get(client_id) is None:
        raise ReferentialError("Cliente não encontrado")


def _validar_servico(storage, service_id: str) -> None:
    servico = storage.services.get(service_id)
    if servico is None:
        raise ReferentialError("Serviço não encontrado")
    if not servico.active:
        raise ReferentialError("Serviço não está ativo")


def _verificar_conflito(storage, dia: date, hora: str, ignorar_id: Optional[str] = None) -> None:
    for existente in storage.appointments.list_by_date(dia):
        if existente.id == ignorar_id or existente.status == CANCELADO:
            continue
        if existente.time == hora:
            logger.warning("Horário %s %s já ocupado pelo agendamento %s", dia, hora, existente.id)
            raise ConflictError("Já existe um agendamento neste horário")


def validar_transicao(atual: str, novo: str) -> None:
    if novo != atual and novo not in TRANSICOES.get(atual, set()):
        raise InvalidTransitionError(f"Transição de status inválida: {atual} → {novo}")


def create_agendamento(storage, agendamento: AgendamentoCreate) -> AgendamentoRead:
    with storage.lock:
        _validar_cliente(storage, agendamento.client_id)
        _validar_servico(storage, agendamento.service_id)
        if agendamento.status != CANCELADO:
            _verificar_conflito(storage, agendamento.date, agendamento.time)
        db_agendamento = storage.appointments.create(agendamento.model_dump())
    logger.info("Agendamento %s criado para %s %s", db_agendamento.id, db_agendamento.date, db_agendamento.time)
    return db_agendamento


def update_agendamento(
    storage,
    agendamento_id: str,
    agendamento_update: AgendamentoUpdate,
    enforce_transitions: bool = False,
) -> AgendamentoRead:
    update_data = agendamento_update.model_dump(exclude_unset=True)
    with storage.lock:
        atual = storage.appointments.get(agendamento_id)
        if atual is None:
            raise NotFoundError("Agendamento não encontrado")

        if "client_id" in update_data and update_data["client_id"] != atual.client_id:
            _validar_cliente(storage, update_data["client_id"])
        if "service_id" in update_data and update_data["service_id"] != atual.service_id:
            _validar_servico(storage, update_data["service_id"])

        if enforce_transitions and "status" in update_data:
            validar_transicao(atual.status, update_data["status"])

        resultado = atual.model_copy(update=update_data)
        remarcando = any(campo in update_data for campo in ("date", "time", "status"))
        if remarcando and resultado.status != CANCELADO:
            _verificar_conflito(storage, resultado.date, resultado.time, ignorar_id=agendamento_id)

        return storage.appointments.update(agendamento_id, update_data)
