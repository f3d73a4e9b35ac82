# -*- coding: utf-8 -*-
"""
Rotas de contas a receber, contas a pagar e resumo financeiro.

Os dois tipos de conta têm o mesmo CRUD; ``build_contas_router`` monta um
router para o repositório indicado.
"""
from datetime import date
from typing import List, Optional
from fastapi import APIRouter, Depends, status

from agenda.database import get_storage
from agenda.errors import NotFoundError
from agenda.schemas.conta import ContaCreate, ContaRead, ContaUpdate, StatusConta
from agenda.services.financeiro import resumo_financeiro


def build_contas_router(repositorio: str, tag: str) -> APIRouter:
    router = APIRouter(
        tags=[tag],
        responses={404: {"description": "Conta não encontrada"}},
    )

    def contas(storage):
        return getattr(storage, repositorio)

    @router.get("", response_model=List[ContaRead])
    def read_contas(storage=Depends(get_storage)):
        return contas(storage).list()

    @router.get("/status/{status_conta}", response_model=List[ContaRead])
    def read_contas_por_status(status_conta: StatusConta, storage=Depends(get_storage)):
        return contas(storage).list_by_status(status_conta)

    @router.post("", status_code=status.HTTP_201_CREATED)
    def create_conta(conta: ContaCreate, storage=Depends(get_storage)):
        db_conta = contas(storage).create(conta.model_dump())
        return {
            "success": True,
            "account": db_conta.model_dump(mode="json"),
            "message": "Conta cadastrada com sucesso",
        }

    @router.get("/{conta_id}", response_model=ContaRead)
    def read_conta(conta_id: str, storage=Depends(get_storage)):
        db_conta = contas(storage).get(conta_id)
        if db_conta is None:
            raise NotFoundError("Conta não encontrada")
        return db_conta

    @router.put("/{conta_id}")
    def update_conta(conta_id: str, dados: ContaUpdate, storage=Depends(get_storage)):
        db_conta = contas(storage).update(conta_id, dados.model_dump(exclude_unset=True))
        if db_conta is None:
            raise NotFoundError("Conta não encontrada")
        return {
            "success": True,
            "account": db_conta.model_dump(mode="json"),
            "message": "Conta atualizada com sucesso",
        }

    @router.delete("/{conta_id}")
    def delete_conta(conta_id: str, storage=Depends(get_storage)):
        if not contas(storage).delete(conta_id):
            raise NotFoundError("Conta não encontrada")
        return {"success": True, "message": "Conta excluída com sucesso"}

    return router


receber_router = build_contas_router("receivables", "Contas a Receber")
pagar_router = build_contas_router("payables", "Contas a Pagar")

router = APIRouter(tags=["Financeiro"])

@router.get("/summary", response_model=dict)
def get_resumo(reference_date: Optional[date] = None, storage=Depends(get_storage)):
    """
    Totais de contas a receber e a pagar, saldo realizado e saldo previsto.
    Contas pendentes com vencimento anterior a ``reference_date`` (padrão: hoje)
    contam como atrasadas.
    """
    return resumo_financeiro(storage, reference_date)
