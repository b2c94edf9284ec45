"""
Couche infrastructure.

Implémentations concrètes des ports du domaine (persistance SQLite via SQLModel).
"""
