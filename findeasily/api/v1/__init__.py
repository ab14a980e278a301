"""
API v1: the aggregated router of every module.
"""

from .router import api_router

__all__ = ["api_router"]
