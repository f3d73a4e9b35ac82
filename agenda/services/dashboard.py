# -*- coding: utf-8 -*-
"""
Contadores exibidos na página inicial do painel.
"""
from datetime import date
from typing import Optional


def resumo_dashboard(storage, dia: Optional[date] = None) -> dict:
    dia = dia or date.today()
    do_dia = [a for a in storage.appointments.list_by_date(dia) if a.status != "cancelado"]
    # HH:MM ordena corretamente como texto
    do_dia.sort(key=lambda a: a.time)

    return {
        "date": dia.isoformat(),
        "appointments_today": len(do_dia),
        "confirmed_today": sum(1 for a in do_dia if a.status == "confirmado"),
        "pending_today": sum(1 for a in do_dia if a.status == "pendente"),
        "next_appointment": do_dia[0].model_dump(mode="json") if do_dia else None,
        "total_clients": len(storage.clients.list()),
        "active_services": len(storage.services.list_active()),
        "low_stock_products": len(storage.products.list_low_stock()),
    }
