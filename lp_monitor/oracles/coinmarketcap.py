"""CoinMarketCap quote provider."""
import logging
import ssl

import aiohttp
import certifi

from ..config import QuotesConfig

logger = logging.getLogger(__name__)

QUOTES_PATH = "/v1/cryptocurrency/quotes/latest"


class CoinMarketCapClient:
    """Fetch latest quotes from the CoinMarketCap Pro API."""

    def __init__(self, config: QuotesConfig) -> None:
        self.base_url = config.base_url.rstrip("/")
        self.api_key = config.api_key
        self.timeout = config.timeout

    async def get_quote(self, symbol: str, convert: str) -> float:
        """Return the latest price of ``symbol`` expressed in ``convert``.

        Raises:
            RuntimeError: on a non-200 response or a payload without the
                requested symbol/currency.
        """
        url = f"{self.base_url}{QUOTES_PATH}"
        params = {"symbol": symbol, "convert": convert}
        headers = {"X-CMC_PRO_API_KEY": self.api_key, "Accept": "application/json"}

        ssl_context = ssl.create_default_context(cafile=certifi.where())
        connector = aiohttp.TCPConnector(ssl=ssl_context)

        async with aiohttp.ClientSession(connector=connector) as session:
            async with session.get(
                url,
                params=params,
                headers=headers,
                timeout=aiohttp.ClientTimeout(total=self.timeout),
            ) as response:
                if response.status != 200:
                    raise RuntimeError(
                        f"CoinMarketCap quote for {symbol} failed: HTTP {response.status}"
                    )
                data = await response.json()

        try:
            price = float(data["data"][symbol]["quote"][convert]["price"])
        except (KeyError, TypeError):
            raise RuntimeError(
                f"CoinMarketCap response has no {convert} quote for {symbol}"
            ) from None

        logger.info("Fetched quote from CoinMarketCap: %s = %.4f %s", symbol, price, convert)
        return price
