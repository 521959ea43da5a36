"""Validation module for element triplet checks"""
from sdo_reader.validation.element_validator import ElementValidator

__all__ = [
    "ElementValidator",
]
