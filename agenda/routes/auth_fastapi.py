# -*- coding: utf-8 -*-
from fastapi import APIRouter, Depends

from agenda.database import get_storage
from agenda.schemas.usuario import LoginRequest
from agenda.services import auth

router = APIRouter(
    prefix="/api/auth",
    tags=["Authentication"]
)

@router.post("/login")
def login(credenciais: LoginRequest, storage=Depends(get_storage)):
    """
    Valida usuário e senha. Responde 401 sem indicar qual dos dois está errado.
    """
    user = auth.authenticate(storage, credenciais.username, credenciais.password)
    return {
        "success": True,
        "user": user.model_dump(),
        "message": "Login realizado com sucesso",
    }
