# -*- coding: utf-8 -*-
"""
GMTool Interfaces Package

This package contains Protocol interfaces for the parser and storage seams.
Using Protocol from typing allows structural subtyping (duck typing)
without requiring explicit inheritance.
"""

from interfaces.i_file_io import IFileIOService
from interfaces.i_parser import ISectionParser

__all__ = [
    'IFileIOService',
    'ISectionParser',
]
