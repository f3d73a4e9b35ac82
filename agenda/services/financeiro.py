# -*- coding: utf-8 -*-
"""
Resumo financeiro de contas a receber e a pagar.
"""
from datetime import date
from typing import List, Optional

from agenda.schemas.conta import ContaRead


def _em_atraso(conta: ContaRead, referencia: date) -> bool:
    return conta.status == "atrasado" or (conta.status == "pendente" and conta.due_date < referencia)


def resumir_contas(contas: List[ContaRead], referencia: date) -> dict:
    validas = [c for c in contas if c.status != "cancelado"]
    return {
        "total": round(sum(c.amount for c in validas), 2),
        "paid": round(sum(c.amount for c in validas if c.status == "pago"), 2),
        "pending": round(sum(c.amount for c in validas if c.status in ("pendente", "atrasado")), 2),
        "overdue": round(sum(c.amount for c in validas if _em_atraso(c, referencia)), 2),
        "count": len(validas),
    }


def resumo_financeiro(storage, referencia: Optional[date] = None) -> dict:
    referencia = referencia or date.today()
    receber = resumir_contas(storage.receivables.list(), referencia)
    pagar = resumir_contas(storage.payables.list(), referencia)
    return {
        "reference_date": referencia.isoformat(),
        "receivables": receber,
        "payables": pagar,
        "balance": round(receber["paid"] - pagar["paid"], 2),
        "projected_balance": round(receber["total"] - pagar["total"], 2),
    }
