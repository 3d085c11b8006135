"""Shared Kernel module.

Foundational components shared by every pipeline in the service: the
command/query message bus and the observation context used by probes.
Changes here affect both the DDD and the CQRS write paths and should be
coordinated accordingly.
"""
