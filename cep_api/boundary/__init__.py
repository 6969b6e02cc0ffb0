"""Boundary adapters: relational storage, in-memory storage, ViaCEP origin."""
