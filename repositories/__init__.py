"""
repositories/ - Data Access Layer
==================================
Each repository encapsulates all queries for a specific domain entity.
Repositories map ORM rows to domain model objects and turn "no rows"
into `models.errors.NotFoundError`.
"""
