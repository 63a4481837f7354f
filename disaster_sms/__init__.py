"""Disaster SMS Agent — answers disaster questions over SMS from community megathreads.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
