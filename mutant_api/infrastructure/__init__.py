"""Infrastructure Layer — database access and cross-cutting concerns.

Invariants:
    - Infrastructure implements core/ protocols, never the other way round
    - All driver errors mapped to the core error hierarchy

Design Decisions:
    - Repository per table over ORM calls scattered in services
"""
