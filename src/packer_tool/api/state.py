"""Shared engine instance for the API."""
from ..engine import PackingEngine

engine = PackingEngine()
