# -*- coding: utf-8 -*-
"""
Modelo SQLAlchemy para a entidade Servico.
"""
from sqlalchemy import Boolean, Column, Float, Integer, String
from agenda.database import Base

class Servico(Base):
    __tablename__ = "servicos"

    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(36), unique=True, index=True, nullable=False)

    name = Column(String(100), nullable=False)
    description = Column(String(255), nullable=True)
    duration = Column(Integer, nullable=False)  # minutos
    price = Column(Float, nullable=False)
    active = Column(Boolean, nullable=False, default=True)
