"""Shared Kernel module.

Components that are explicitly shared across the IAM and APIs bounded
contexts: workspace identifiers, the audit log contract, the outbox
contract, session token validation and the observation context used by
every domain probe.

Changes to this module affect multiple contexts and should be carefully
coordinated.
"""
