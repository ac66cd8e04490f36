from queryhooks.hooks.base import Hook
from queryhooks.hooks.sort import SortHook

__all__ = ["Hook", "SortHook"]
