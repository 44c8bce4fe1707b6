# app/adapters/outbound/persistence/seeds/__init__.py

"""
Módulo de seeds para inicialização do banco de dados.

Este módulo contém funções para popular o banco de dados
com dados iniciais necessários para o funcionamento do sistema.
"""

import logging
from sqlalchemy.orm import sessionmaker

from app.adapters.outbound.persistence.seeds.access import run_access_seed

# Configurar logger
logger = logging.getLogger(__name__)


def run_all_seeds(session_factory: sessionmaker = None) -> None:
    """
    Executa todos os scripts de seed em ordem.

    Args:
        session_factory: Fábrica de sessões síncronas (padrão: banco configurado)
    """
    logger.info("Iniciando execução de todos os seeds")

    run_access_seed(session_factory)

    logger.info("Todos os seeds foram executados com sucesso")
