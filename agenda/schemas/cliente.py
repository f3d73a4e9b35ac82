# -*- coding: utf-8 -*-
"""
Schemas Pydantic para a entidade Cliente.
"""

from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import Optional

from agenda.schemas.comum import nao_nulo, vazio_para_none

class ClienteBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    phone: str = Field(..., min_length=1, max_length=20)
    email: EmailStr
    address: Optional[str] = Field(None, max_length=255)
    tax_id: Optional[str] = Field(None, max_length=20)
    observations: Optional[str] = None

    @field_validator('address', 'tax_id', 'observations', mode='before')
    @classmethod
    def empty_str_to_none(cls, v):
        return vazio_para_none(v)

class ClienteCreate(ClienteBase):
    pass

class ClienteUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    phone: Optional[str] = Field(None, min_length=1, max_length=20)
    email: Optional[EmailStr] = None
    address: Optional[str] = Field(None, max_length=255)
    tax_id: Optional[str] = Field(None, max_length=20)
    observations: Optional[str] = None

    @field_validator('name', 'phone', 'email')
    @classmethod
    def required_not_null(cls, v):
        return nao_nulo(v)

    @field_validator('address', 'tax_id', 'observations', mode='before')
    @classmethod
    def empty_str_to_none_update(cls, v):
        return vazio_para_none(v)

class ClienteRead(BaseModel):
    id: str
    name: str
    phone: str
    email: str
    address: Optional[str] = None
    tax_id: Optional[str] = None
    observations: Optional[str] = None

    model_config = {"from_attributes": True}
