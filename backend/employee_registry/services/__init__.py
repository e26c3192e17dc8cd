"""Services Layer — request adapter between routes and the record store.

Invariants:
    - Services receive plain values (ids, dicts), never Request objects
    - Store failures leave this layer as EmployeeRegistryError subclasses
"""
