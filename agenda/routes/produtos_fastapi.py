# -*- coding: utf-8 -*-
"""
Rotas FastAPI para o CRUD de Produtos.
"""

from typing import List
from fastapi import APIRouter, Depends, status

from agenda.database import get_storage
from agenda.errors import NotFoundError
from agenda.schemas.produto import CategoriaProduto, ProdutoCreate, ProdutoRead, ProdutoUpdate

router = APIRouter(
    tags=["Produtos"],
    responses={404: {"description": "Produto não encontrado"}},
)

NAO_ENCONTRADO = "Produto não encontrado"

# --- CRUD Endpoints ---

@router.post("", status_code=status.HTTP_201_CREATED)
def create_produto(produto: ProdutoCreate, storage=Depends(get_storage)):
    """
    Cria um novo produto.
    """
    db_produto = storage.products.create(produto.model_dump())
    return {
        "success": True,
        "product": db_produto.model_dump(mode="json"),
        "message": "Produto cadastrado com sucesso",
    }

@router.get("", response_model=List[ProdutoRead])
def read_produtos(storage=Depends(get_storage)):
    return storage.products.list()

@router.get("/active", response_model=List[ProdutoRead])
def read_produtos_ativos(storage=Depends(get_storage)):
    return storage.products.list_active()

@router.get("/low-stock", response_model=List[ProdutoRead])
def read_produtos_estoque_baixo(storage=Depends(get_storage)):
    """
    Produtos com quantidade menor ou igual à quantidade mínima.
    """
    return storage.products.list_low_stock()

@router.get("/category/{categoria}", response_model=List[ProdutoRead])
def read_produtos_por_categoria(categoria: CategoriaProduto, storage=Depends(get_storage)):
    return storage.products.list_by_category(categoria)

@router.get("/{produto_id}", response_model=ProdutoRead)
def read_produto(produto_id: str, storage=Depends(get_storage)):
    """
    Obtém os detalhes de um produto específico pelo ID.
    """
    db_produto = storage.products.get(produto_id)
    if db_produto is None:
        raise NotFoundError(NAO_ENCONTRADO)
    return db_produto

@router.put("/{produto_id}")
def update_produto(produto_id: str, produto_update: ProdutoUpdate, storage=Depends(get_storage)):
    """
    Atualiza os dados de um produto existente.
    """
    db_produto = storage.products.update(produto_id, produto_update.model_dump(exclude_unset=True))
    if db_produto is None:
        raise NotFoundError(NAO_ENCONTRADO)
    return {
        "success": True,
        "product": db_produto.model_dump(mode="json"),
        "message": "Produto atualizado com sucesso",
    }

@router.delete("/{produto_id}")
def delete_produto(produto_id: str, storage=Depends(get_storage)):
    if not storage.products.delete(produto_id):
        raise NotFoundError(NAO_ENCONTRADO)
    return {"success": True, "message": "Produto excluído com sucesso"}
