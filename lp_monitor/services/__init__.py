"""Service modules"""
from .monitor import Monitor
from .price_service import CachedTokenResolver, QuoteCache
from .report import ReportRenderer

__all__ = ["CachedTokenResolver", "Monitor", "QuoteCache", "ReportRenderer"]
