from pydantic import BaseModel, Field

class LoginRequest(BaseModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)

class UsuarioCreate(LoginRequest):
    pass

class UsuarioRead(BaseModel):
    id: str
    username: str

    model_config = {"from_attributes": True}

# Registro interno com a senha; nunca é devolvido pela API
class UsuarioInterno(UsuarioRead):
    password: str
