"""Domain layer for the users context.

Pure business rules: value objects, the user entity and aggregate, domain
events and the domain service. Nothing here depends on the database layer.
"""
