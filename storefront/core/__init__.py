"""Core Layer - pure domain logic, no IO, no logging, no config.

Invariants:
    - No module in core/ imports from services/, infrastructure/, or config
    - All rule checks are pure and deterministic; value objects are frozen

Design Decisions:
    - Functional core separated from imperative shell: services/ logs and
      orchestrates, core/ decides
"""
