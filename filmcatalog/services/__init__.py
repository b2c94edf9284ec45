"""
Application services layer (use cases).

Services orchestrate the domain logic of the catalog:
- validation.py : pure validation rules per entity
- catalog.py : create / update / delete / lookup per entity, delete guards

Services depend on the catalog gateway port, never on a concrete session.
"""
