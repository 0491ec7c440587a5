"""Reference gradient collaborator for gradient-typed colors."""

from .gradient import Gradient, GradientStop

__all__ = ["Gradient", "GradientStop"]
