"""Series store for FHFA HPI tables."""

from .series import HPISeries
from .dataset import HPIData

__all__ = [
    "HPISeries",
    "HPIData"
]
