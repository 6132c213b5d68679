"""APIs bounded context.

Read access to the keyrings (APIs) of a workspace and the keys they hold.
"""
