# -*- coding: utf-8 -*-
"""
Schemas Pydantic para a entidade Produto.
"""

from pydantic import BaseModel, Field, field_validator
from typing import Literal, Optional
from datetime import datetime

from agenda.schemas.comum import nao_nulo, vazio_para_none

CategoriaProduto = Literal["consumo", "venda", "uso"]

_OPCIONAIS = ('description', 'cost_price', 'sale_price', 'supplier', 'barcode')

# Schema base para Produto
class ProdutoBase(BaseModel):
    model_config = {"allow_inf_nan": False}

    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=255)
    category: CategoriaProduto
    quantity: float = Field(0, ge=0)
    min_quantity: float = Field(5, ge=0)
    unit: str = Field(..., min_length=1, max_length=20)
    cost_price: Optional[float] = Field(None, ge=0)
    sale_price: Optional[float] = Field(None, ge=0)
    supplier: Optional[str] = Field(None, max_length=100)
    barcode: Optional[str] = Field(None, max_length=50)
    active: bool = True

    @field_validator(*_OPCIONAIS, mode='before')
    @classmethod
    def empty_str_to_none(cls, v):
        return vazio_para_none(v)

# Schema para criação de Produto
class ProdutoCreate(ProdutoBase):
    pass

# Schema para atualização de Produto
class ProdutoUpdate(BaseModel):
    model_config = {"allow_inf_nan": False}

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=255)
    category: Optional[CategoriaProduto] = None
    quantity: Optional[float] = Field(None, ge=0)
    min_quantity: Optional[float] = Field(None, ge=0)
    unit: Optional[str] = Field(None, min_length=1, max_length=20)
    cost_price: Optional[float] = Field(None, ge=0)
    sale_price: Optional[float] = Field(None, ge=0)
    supplier: Optional[str] = Field(None, max_length=100)
    barcode: Optional[str] = Field(None, max_length=50)
    active: Optional[bool] = None

    @field_validator('name', 'category', 'quantity', 'min_quantity', 'unit', 'active')
    @classmethod
    def required_not_null(cls, v):
        return nao_nulo(v)

    @field_validator(*_OPCIONAIS, mode='before')
    @classmethod
    def empty_str_to_none_update(cls, v):
        return vazio_para_none(v)

# Schema para leitura/retorno de Produto
class ProdutoRead(ProdutoBase):
    id: str
    created_at: datetime

    model_config = {"from_attributes": True}
