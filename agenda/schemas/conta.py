# -*- coding: utf-8 -*-
"""
Schemas Pydantic para contas a receber e a pagar (mesma estrutura).
"""

from pydantic import BaseModel, Field, field_validator
from typing import Literal, Optional
from datetime import date, datetime

from agenda.schemas.comum import nao_nulo, vazio_para_none

StatusConta = Literal["pendente", "pago", "atrasado", "cancelado"]

_OPCIONAIS = ('payment_date', 'payment_method', 'category', 'observations')

class ContaBase(BaseModel):
    model_config = {"allow_inf_nan": False}

    description: str = Field(..., min_length=1, max_length=255)
    amount: float = Field(..., ge=0)
    due_date: date
    payment_date: Optional[date] = None
    status: StatusConta = "pendente"
    payment_method: Optional[str] = Field(None, max_length=50)
    category: Optional[str] = Field(None, max_length=50)
    observations: Optional[str] = None

    @field_validator(*_OPCIONAIS, mode='before')
    @classmethod
    def empty_str_to_none(cls, v):
        return vazio_para_none(v)

class ContaCreate(ContaBase):
    pass

class ContaUpdate(BaseModel):
    model_config = {"allow_inf_nan": False}

    description: Optional[str] = Field(None, min_length=1, max_length=255)
    amount: Optional[float] = Field(None, ge=0)
    due_date: Optional[date] = None
    payment_date: Optional[date] = None
    status: Optional[StatusConta] = None
    payment_method: Optional[str] = Field(None, max_length=50)
    category: Optional[str] = Field(None, max_length=50)
    observations: Optional[str] = None

    @field_validator('description', 'amount', 'due_date', 'status')
    @classmethod
    def required_not_null(cls, v):
        return nao_nulo(v)

    @field_validator(*_OPCIONAIS, mode='before')
    @classmethod
    def empty_str_to_none_update(cls, v):
        return vazio_para_none(v)

class ContaRead(ContaBase):
    id: str
    created_at: datetime

    model_config = {"from_attributes": True}
