# app/adapters/outbound/persistence/seeds/access.py

"""
Script de seed para os tipos de acesso padrão.

A migração que cria a tabela access já insere essas linhas; este seed
recria as que faltarem em bancos construídos de outra forma.
"""

import logging
from sqlalchemy import create_engine, select
from sqlalchemy.orm import Session, sessionmaker

from app.adapters.configuration.config import settings
from app.adapters.outbound.persistence.models.access_model import Access
from app.domain.models.access_domain_model import DEFAULT_ACCESS_NAMES

logger = logging.getLogger(__name__)


def seed_access(session: Session) -> int:
    """
    Insert the default access names that are not present yet, in order.

    Args:
        session: Open sync session; the caller commits

    Returns:
        Number of rows inserted
    """
    existing = set(session.scalars(select(Access.access_name)).all())
    created = 0
    for name in DEFAULT_ACCESS_NAMES:
        if name in existing:
            logger.info(f"🟡 Access '{name}' já existe.")
            continue
        session.add(Access(access_name=name))
        session.flush()
        created += 1
        logger.info(f"🟢 Access '{name}' criado.")
    return created


def run_access_seed(session_factory: sessionmaker = None) -> int:
    """
    Executa o seed de acessos.

    Sem uma fábrica de sessões, cria um engine temporário para o banco
    configurado e o descarta ao final.
    """
    owned_engine = None
    if session_factory is None:
        owned_engine = create_engine(settings.SYNC_DATABASE_URL)
        session_factory = sessionmaker(bind=owned_engine, autoflush=False, autocommit=False)

    session = session_factory()
    try:
        created = seed_access(session)
        session.commit()
        logger.info("✅ Seed de acessos finalizado com sucesso.")
        return created
    except Exception as e:
        session.rollback()
        logger.error(f"🔴 Erro ao executar seed: {e}")
        raise
    finally:
        session.close()
        if owned_engine is not None:
            owned_engine.dispose()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    run_access_seed()
