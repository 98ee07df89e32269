"""Shared Kernel module.

Components every bounded context of tokend depends on: the identity and
permission model (``context``), authorization (``authorization``), error
types, cursor pagination and observation contexts. It imports nothing from
the bounded contexts or from infrastructure.
"""
