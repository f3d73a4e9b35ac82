# -*- coding: utf-8 -*-
"""
Schemas Pydantic para a entidade Agendamento.
"""

import datetime as dt
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

from agenda.schemas.comum import HORA_REGEX, nao_nulo, vazio_para_none

StatusAgendamento = Literal["pendente", "confirmado", "cancelado", "concluido"]

class AgendamentoBase(BaseModel):
    client_id: str = Field(..., min_length=1)
    service_id: str = Field(..., min_length=1)
    date: dt.date
    time: str = Field(..., pattern=HORA_REGEX, description="Horário no formato HH:MM")
    status: StatusAgendamento = "pendente"
    observations: Optional[str] = None

    @field_validator('observations', mode='before')
    @classmethod
    def empty_str_to_none(cls, v):
        return vazio_para_none(v)

class AgendamentoCreate(AgendamentoBase):
    pass

class AgendamentoUpdate(BaseModel):
    client_id: Optional[str] = Field(None, min_length=1)
    service_id: Optional[str] = Field(None, min_length=1)
    date: Optional[dt.date] = None
    time: Optional[str] = Field(None, pattern=HORA_REGEX)
    status: Optional[StatusAgendamento] = None
    observations: Optional[str] = None

    @field_validator('client_id', 'service_id', 'date', 'time', 'status')
    @classmethod
    def required_not_null(cls, v):
        return nao_nulo(v)

    @field_validator('observations', mode='before')
    @classmethod
    def empty_str_to_none_update(cls, v):
        return vazio_para_none(v)

class AgendamentoRead(AgendamentoBase):
    id: str
    created_at: dt.datetime

    model_config = {"from_attributes": True}
