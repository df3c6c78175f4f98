"""Transports and the request-function factory."""
