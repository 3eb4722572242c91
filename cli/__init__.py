"""CLI package for the Bookcase catalog"""
from .main import cli

__all__ = ['cli']
