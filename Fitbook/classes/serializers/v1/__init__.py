from .fitness_class import (
    FitnessClassCreateSerializer,
    FitnessClassListSerializer,
    FitnessClassDetailSerializer,
)

__all__ = [
    'FitnessClassCreateSerializer',
    'FitnessClassListSerializer',
    'FitnessClassDetailSerializer',
]
