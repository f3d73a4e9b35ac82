# -*- coding: utf-8 -*-
"""
Modelo SQLAlchemy para a entidade Produto.
"""
from sqlalchemy import Boolean, Column, DateTime, Float, Integer, String
from agenda.database import Base

class Produto(Base):
    __tablename__ = 'produtos'

    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(36), unique=True, index=True, nullable=False)

    name = Column(String(100), nullable=False)
    description = Column(String(255), nullable=True)
    category = Column(String(20), index=True, nullable=False)  # consumo, venda ou uso
    quantity = Column(Float, nullable=False, default=0)
    min_quantity = Column(Float, nullable=False, default=5)
    unit = Column(String(20), nullable=False)
    cost_price = Column(Float, nullable=True)
    sale_price = Column(Float, nullable=True)
    supplier = Column(String(100), nullable=True)
    barcode = Column(String(50), nullable=True)
    active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, nullable=False)
