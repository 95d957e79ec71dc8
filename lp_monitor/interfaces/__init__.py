"""Protocol interfaces for the LP position reporter."""
from .chain import ChainClient
from .position_source import PositionSource
from .quote_provider import QuoteProvider
from .token_resolver import TokenReferenceResolver

__all__ = ["ChainClient", "PositionSource", "QuoteProvider", "TokenReferenceResolver"]
