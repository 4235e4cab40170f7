from .files import FileStorage

__all__ = ["FileStorage"]
