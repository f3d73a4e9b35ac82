# -*- coding: utf-8 -*-
"""
Modelo SQLAlchemy para a entidade Cliente.
"""
from sqlalchemy import Column, Integer, String, Text
from agenda.database import Base

class Cliente(Base):
    __tablename__ = "clientes"

    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(36), unique=True, index=True, nullable=False)

    name = Column(String(100), nullable=False)
    phone = Column(String(20), nullable=False)
    # Unicidade do e-mail é verificada na camada de serviços
    email = Column(String(100), index=True, nullable=False)
    address = Column(String(255), nullable=True)
    tax_id = Column(String(20), nullable=True)
    observations = Column(Text, nullable=True)
