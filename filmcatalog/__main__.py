"""Permet ``python -m filmcatalog``."""

from .main import main

main()
