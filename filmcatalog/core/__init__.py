"""
Couche domaine (core).

Contient les entités métier, les exceptions du domaine et les ports (interfaces
abstraites). Cette couche n'a AUCUNE dépendance vers l'infrastructure
(adapters, frameworks, BDD).

Sous-packages :
- entities/ : Entités métier (Genre, Director, Film)
- ports/ : Interfaces abstraites définissant les contrats de persistance
"""
