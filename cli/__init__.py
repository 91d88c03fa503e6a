"""CLI package for the Reading Lists service"""
from .main import cli

__all__ = ['cli']
