# -*- coding: utf-8 -*-
"""
Modelos SQLAlchemy para contas a receber e contas a pagar.

As duas tabelas têm a mesma estrutura; a classe ``ContaMixin`` concentra as
colunas em comum.
"""
from sqlalchemy import Column, Date, DateTime, Float, Integer, String, Text
from agenda.database import Base

class ContaMixin:
    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(36), unique=True, index=True, nullable=False)

    description = Column(String(255), nullable=False)
    amount = Column(Float, nullable=False)
    due_date = Column(Date, nullable=False)
    payment_date = Column(Date, nullable=True)
    status = Column(String(20), nullable=False, default='pendente')  # pendente, pago, atrasado, cancelado
    payment_method = Column(String(50), nullable=True)
    category = Column(String(50), nullable=True)
    observations = Column(Text, nullable=True)
    created_at = Column(DateTime, nullable=False)


class ContaReceber(ContaMixin, Base):
    __tablename__ = 'contas_receber'


class ContaPagar(ContaMixin, Base):
    __tablename__ = 'contas_pagar'
