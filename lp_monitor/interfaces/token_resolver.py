"""Token resolver protocol: token to reference-currency price."""
from typing import Protocol

from ..models import Token


class TokenReferenceResolver(Protocol):
    """Prices tokens in a single reference currency."""

    referenced_token: str

    async def get_quote(self, token: Token) -> float: ...
