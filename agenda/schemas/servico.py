# -*- coding: utf-8 -*-
"""
Schemas Pydantic para a entidade Servico.

``duration`` e ``price`` aceitam números ou texto numérico ("30", "20.00");
``active`` aceita booleano ou as strings "true"/"false".
"""

from pydantic import BaseModel, Field, field_validator
from typing import Optional

from agenda.schemas.comum import nao_nulo, vazio_para_none

# Duração em minutos, no máximo um dia
DURACAO_MAXIMA = 24 * 60

class ServicoBase(BaseModel):
    model_config = {"allow_inf_nan": False}

    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=255)
    duration: int = Field(..., ge=0, le=DURACAO_MAXIMA)
    price: float = Field(..., ge=0)
    active: bool = True

    @field_validator('description', mode='before')
    @classmethod
    def empty_str_to_none(cls, v):
        return vazio_para_none(v)

class ServicoCreate(ServicoBase):
    pass

class ServicoUpdate(BaseModel):
    model_config = {"allow_inf_nan": False}

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=255)
    duration: Optional[int] = Field(None, ge=0, le=DURACAO_MAXIMA)
    price: Optional[float] = Field(None, ge=0)
    active: Optional[bool] = None

    @field_validator('name', 'duration', 'price', 'active')
    @classmethod
    def required_not_null(cls, v):
        return nao_nulo(v)

    @field_validator('description', mode='before')
    @classmethod
    def empty_str_to_none_update(cls, v):
        return vazio_para_none(v)

class ServicoRead(ServicoBase):
    id: str

    model_config = {"from_attributes": True}
