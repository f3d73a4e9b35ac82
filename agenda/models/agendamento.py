# -*- coding: utf-8 -*-
"""
Modelo SQLAlchemy para a entidade Agendamento.
"""
from sqlalchemy import Column, Date, DateTime, Integer, String, Text
from agenda.database import Base

class Agendamento(Base):
    __tablename__ = "agendamentos"

    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(36), unique=True, index=True, nullable=False)

    # Sem ForeignKey: clientes e serviços podem ser excluídos sem apagar o histórico
    client_id = Column(String(36), index=True, nullable=False)
    service_id = Column(String(36), index=True, nullable=False)
    date = Column(Date, index=True, nullable=False)
    time = Column(String(5), nullable=False)  # HH:MM
    status = Column(String(20), nullable=False, default="pendente")
    observations = Column(Text, nullable=True)
    created_at = Column(DateTime, nullable=False)
