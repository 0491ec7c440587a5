from .formatter import format_number

__all__ = ["format_number"]
