"""Services Layer — async orchestration around the pure core.

Invariants:
    - Services receive repositories by injection, never open sessions themselves
    - Core functions called synchronously inside async orchestration

Design Decisions:
    - One service per endpoint family: MutantService (/mutant), StatsService (/stats)
"""
