"""Services Layer - convenience facades over the core builders.

Invariants:
    - Facades hold no state; every call builds a fresh builder
    - Facades log outcomes, core/ never does

Design Decisions:
    - One facade per value type for locality
"""
