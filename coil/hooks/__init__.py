"""
Hook System

Public API:
    HookRegistry - action/filter registration table and dispatcher
"""

from .registry import HookRegistry

__all__ = ["HookRegistry"]
