"""Point-free composition: pipe(), flow() and curried operation helpers."""

from . import curried
from .pipe import Flow, flow, method, pipe

__all__ = ["Flow", "flow", "method", "pipe", "curried"]
