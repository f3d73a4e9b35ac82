# -*- coding: utf-8 -*-

from datetime import date
from typing import Optional
from fastapi import APIRouter, Depends, Query

from agenda.database import get_storage
from agenda.services.dashboard import resumo_dashboard

router = APIRouter(
    tags=["Dashboard"],
)

@router.get("/summary")
def get_resumo_dashboard(
    dia: Optional[date] = Query(None, alias="date"),
    storage=Depends(get_storage),
):
    """
    Retorna os agendamentos do dia, o próximo horário, total de clientes,
    serviços ativos e produtos com estoque baixo.
    """
    return resumo_dashboard(storage, dia)
