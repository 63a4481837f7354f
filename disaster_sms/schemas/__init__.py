"""Pydantic Schemas — validation at system boundaries (webhook body, thread JSON, tool input)."""
