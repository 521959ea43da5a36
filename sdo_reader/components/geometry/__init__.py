"""
Geometry module for SDO decoding.

This module provides the geometry factory interface and its shapely
implementation, ring helpers, and the recursive builder that turns element
triplets into geometries.
"""

from sdo_reader.components.geometry.geometry_factory import IGeometryFactory, ShapelyGeometryFactory
from sdo_reader.components.geometry.geometry_ops import GeometryOps
from sdo_reader.components.geometry.parts_builder import PartsBuilder
from sdo_reader.components.geometry.geometry_builder import GeometryBuilder

__all__ = [
    'IGeometryFactory',
    'ShapelyGeometryFactory',
    'GeometryOps',
    'PartsBuilder',
    'GeometryBuilder',
]
