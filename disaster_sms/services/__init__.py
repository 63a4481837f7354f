"""Services Layer — tool handlers, tool dispatch, and the agent runner.

Invariants:
    - Tool dispatch uses an explicit dict mapping (no auto-discovery)
    - Tool failures are returned to the model, never raised into the loop
"""
