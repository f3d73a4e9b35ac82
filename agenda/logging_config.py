# -*- coding: utf-8 -*-
"""
Configuração básica de logging da aplicação.
"""

import logging
from typing import Optional


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configura o logger raiz com saída no console e, opcionalmente, em arquivo.

    Se o logger raiz já possui handlers (por exemplo, ao rodar os testes ou
    ao chamar ``create_app`` mais de uma vez), nada é feito.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(logfile, encoding="utf-8"))

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers,
    )
