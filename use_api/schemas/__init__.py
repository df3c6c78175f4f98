"""Pydantic models describing outbound requests."""
