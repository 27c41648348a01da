"""
Classes V1 Views
"""
from .fitness_class import FitnessClassViewSet

__all__ = ['FitnessClassViewSet']
