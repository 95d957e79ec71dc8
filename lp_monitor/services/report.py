"""Plain-text report rendering with lightweight [b]/[u]/[s] markup."""
from __future__ import annotations

import math
import sys
from dataclasses import dataclass

from ..protocols.uniswap_v3.stats import PositionStats, TokenSide

EPSILON = sys.float_info.epsilon


def js_round(value: float) -> int:
    """Round half toward positive infinity, like JavaScript's Math.round."""
    floor = math.floor(value)
    return floor + 1 if value - floor >= 0.5 else floor


def round_decimals(value: float, places: int) -> float:
    """Round to ``places`` decimals, nudged by EPSILON so 1.005 → 1.01."""
    factor = 10**places
    return js_round((value + EPSILON) * factor) / factor


def round3(value: float) -> float:
    return round_decimals(value, 3)


def round2(value: float) -> float:
    return round_decimals(value, 2)


def format_number(value: float) -> str:
    """Shortest number text, without a trailing ``.0`` on whole values."""
    if value == int(value):
        return str(int(value))
    return repr(value)


def _cell(value: float) -> str:
    return format_number(value).ljust(7)


@dataclass(frozen=True)
class ReportTotals:
    liquidity: float
    fees: float

    @property
    def combined(self) -> float:
        return self.liquidity + self.fees


class ReportRenderer:
    """Renders position records in the reference currency ``currency``."""

    def __init__(self, currency: str) -> None:
        self.currency = currency

    async def _side_line(self, side: TokenSide) -> tuple[str, float, float]:
        ref_liquidity = await side.liquidity.to_referenced_quote()
        ref_fee = await side.fee.to_referenced_quote()
        line = (
            f"{_cell(round3(side.liquidity.amount))} "
            f"{side.liquidity.token.symbol.ljust(4)} "
            f"([b]{_cell(round2(ref_liquidity))}[/b] {self.currency})  "
            f"{_cell(round3(side.fee.amount))} "
            f"([b]{_cell(round2(ref_fee))}[/b])\n"
        )
        return line, ref_liquidity, ref_fee

    async def render_position(self, record: PositionStats) -> tuple[str, float, float]:
        """Two lines (token0, token1) plus a blank line; returns the sums too."""
        line0, liquidity0, fee0 = await self._side_line(record.token0)
        line1, liquidity1, fee1 = await self._side_line(record.token1)
        return line0 + line1 + "\n", liquidity0 + liquidity1, fee0 + fee1

    def render_totals(self, totals: ReportTotals) -> str:
        return (
            " " * 14
            + f"[u][b]{_cell(round2(totals.liquidity))}[/b][/u] {self.currency}"
            + " " * 12
            + f"[u][b]{_cell(round2(totals.fees))}[/b][/u]\n\n"
            + " " * 23
            + f"[s=1.4][u][b]{_cell(round2(totals.combined))}[/b] "
            + f"{self.currency}[/u][/s]"
        )

