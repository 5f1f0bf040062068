from .base_adapter import BaseAdapter

__all__ = ["BaseAdapter"]
