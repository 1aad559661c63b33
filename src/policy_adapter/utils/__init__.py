"""Shared utility modules for policy_adapter."""

__all__ = [
    'config',
    'constants',
    'exceptions',
    'logger',
    'models',
]
