# app/adapters/outbound/persistence/seeds/__main__.py

"""Permite executar todos os seeds: `python -m app.adapters.outbound.persistence.seeds`"""

import logging

from app.adapters.outbound.persistence.seeds import run_all_seeds

logging.basicConfig(level=logging.INFO)
run_all_seeds()
