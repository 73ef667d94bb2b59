"""
Generators module for sales dashboard data.

Contains the bounded random value synthesizer and the dataset generator
that builds the monthly, product, region and daily collections.
"""

from .dataset_generator import DatasetGenerator, generate_dataset
from .synthesizer import RandomValueSynthesizer

__all__ = [
    "DatasetGenerator",
    "RandomValueSynthesizer",
    "generate_dataset",
]
