"""ORM Models — SQLAlchemy declarative models for persisted entities.

Invariants:
    - All models inherit from Base (db/base.py)

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all or
      Alembic autogenerate runs
"""

from mutant_api.models.dna_record import DnaRecord  # noqa: F401
