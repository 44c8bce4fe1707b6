# app/adapters/outbound/persistence/models/base_model.py

from sqlalchemy import BigInteger, Integer
from sqlalchemy.orm import DeclarativeBase

# BIGINT primary keys; SQLite only auto-assigns ids for INTEGER PRIMARY KEY
IdType = BigInteger().with_variant(Integer(), "sqlite")


class Base(DeclarativeBase):
    """
    Classe pai de todos os modelos ORM para controle de metadados.

    Tables flagged with ``info={"external": True}`` belong to other systems:
    they are mapped so foreign keys resolve, but migrations never touch them.
    """
    pass
