"""Parameter models for the genome annotation API."""

from .models import InputsGetMrnaByGene

__all__ = ["InputsGetMrnaByGene"]
