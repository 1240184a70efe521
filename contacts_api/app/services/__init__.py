"""
Service layer abstraction.

Services encapsulate the business logic for a domain.  The contact
registry keeps its records in memory; because API handlers only talk
to ``ContactService`` through a dependency, it could be swapped for a
database-backed implementation without changing the handlers.
"""
