# -*- coding: utf-8 -*-
"""
Configuração da aplicação lida de variáveis de ambiente (e do arquivo .env).
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


def _env_bool(nome: str, padrao: str) -> bool:
    return os.getenv(nome, padrao).strip().lower() in {"1", "true", "yes", "sim"}


@dataclass
class Settings:
    environment: str = os.getenv("ENVIRONMENT", "development")

    # "sqlite://" cria um banco em memória que vive enquanto o processo existir
    database_url: str = os.getenv("DATABASE_URL", "sqlite://")

    frontend_url: str = os.getenv("FRONTEND_URL", "http://localhost:5173")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    admin_username: str = os.getenv("ADMIN_USERNAME", "admin")
    admin_password: str = os.getenv("ADMIN_PASSWORD", "admin123")
    seed_default_services: bool = _env_bool("SEED_DEFAULT_SERVICES", "true")

    # Quando ativo, o status do agendamento só muda seguindo o fluxo
    # pendente -> confirmado -> concluido (cancelado a partir dos dois primeiros)
    enforce_status_transitions: bool = _env_bool("ENFORCE_STATUS_TRANSITIONS", "false")

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


settings = Settings()
