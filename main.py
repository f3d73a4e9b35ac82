# -*- coding: utf-8 -*-
"""
Arquivo principal da aplicação FastAPI para o sistema de gestão de agenda.

``create_app`` monta a aplicação com o seu próprio ``Storage``; o objeto
``app`` criado no import é o que o uvicorn serve::

    uvicorn main:app --reload
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from agenda.config import Settings, settings as default_settings
from agenda.errors import AppError, DataValidationError
from agenda.logging_config import setup_logging
from agenda.routes import (agendamentos_fastapi, auth_fastapi, clientes_fastapi, dashboard_fastapi,
                           financeiro_fastapi, produtos_fastapi, servicos_fastapi)
from agenda.storage import Storage
import seed_data

logger = logging.getLogger(__name__)


def _validation_errors(exc: RequestValidationError):
    errors = []
    for erro in exc.errors():
        campo = ".".join(str(parte) for parte in erro.get("loc", ()) if parte not in ("body", "query", "path"))
        errors.append({"field": campo, "message": erro.get("msg", "")})
    return errors


def _error_response(exc: AppError) -> JSONResponse:
    body = {"success": False, "message": exc.message}
    if exc.errors:
        body["errors"] = exc.errors
    return JSONResponse(status_code=exc.status_code, content=body)


def _setup_error_handlers(app: FastAPI) -> None:

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        return _error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return _error_response(DataValidationError(errors=_validation_errors(exc)))

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"success": False, "message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def internal_error_handler(request: Request, exc: Exception):
        logger.error("Erro inesperado em %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(
            status_code=500,
            content={"success": False, "message": "Erro interno do servidor"},
        )


def create_app(settings: Optional[Settings] = None, storage: Optional[Storage] = None) -> FastAPI:
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file or None)

    # Documentação desativada em produção
    app = FastAPI(
        title="API Gestão de Agenda",
        description="API para agendamentos, clientes, serviços, estoque e financeiro",
        version="1.0.0",
        docs_url=None if settings.is_production else "/docs",
        redoc_url=None if settings.is_production else "/redoc",
        openapi_url=None if settings.is_production else "/openapi.json",
    )

    if storage is None:
        storage = Storage(settings.database_url)
        seed_data.seed(storage, settings)
    app.state.storage = storage
    app.state.settings = settings

    origins = [
        settings.frontend_url,
        "http://localhost:5173",
        "http://localhost",
        "http://127.0.0.1",
    ]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    _setup_error_handlers(app)

    # Montagem dos routers
    app.include_router(auth_fastapi.router)
    app.include_router(clientes_fastapi.router, prefix="/api/clients")
    app.include_router(servicos_fastapi.router, prefix="/api/services")
    app.include_router(agendamentos_fastapi.router, prefix="/api/appointments")
    app.include_router(produtos_fastapi.router, prefix="/api/products")
    app.include_router(financeiro_fastapi.receber_router, prefix="/api/accounts-receivable")
    app.include_router(financeiro_fastapi.pagar_router, prefix="/api/accounts-payable")
    app.include_router(financeiro_fastapi.router, prefix="/api/financial")
    app.include_router(dashboard_fastapi.router, prefix="/api/dashboard")

    @app.get("/", tags=["Root"])
    async def root():
        return {
            "mensagem": "API Gestão de Agenda",
            "documentacao": app.docs_url,
            "endpoints": [
                {"auth": "/api/auth/login"},
                {"clientes": "/api/clients"},
                {"servicos": "/api/services"},
                {"agendamentos": "/api/appointments"},
                {"produtos": "/api/products"},
                {"contas_receber": "/api/accounts-receivable"},
                {"contas_pagar": "/api/accounts-payable"},
                {"financeiro": "/api/financial/summary"},
                {"dashboard": "/api/dashboard/summary"},
            ]
        }

    logger.info("Aplicação iniciada no modo %s", settings.environment)
    return app


app = create_app()
