"""Users bounded context.

Manages the lifecycle of user accounts through two parallel write paths:
the domain model (value objects, aggregate, domain and application services)
and the command/query handlers dispatched through the shared message bus.
Both paths persist through the same repository port.
"""
