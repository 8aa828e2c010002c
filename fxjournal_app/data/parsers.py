"""
Trade form parsing.

Converts the raw string fields submitted by the trade form into a Trade,
computing and caching its P/L and pip value. This is the layer that guards
the calculator against malformed numbers.
"""

import re
import uuid
from collections.abc import Mapping
from datetime import date
from typing import Any, Optional

from ..calculator.pip_value import compute_pip_value
from ..calculator.pnl import compute_pl
from ..errors import MalformedDataError, MissingDataError
from ..instruments.classifier import PairInfo, describe
from ..utils.time import format_trade_date, parse_trade_date, today_local, utc_now_iso
from .models import NO_TRADE_SYMBOL, Trade, TradeDirection

# Leading decimal literal, the way a browser's parseFloat reads "1.5 lots"
_LEADING_FLOAT = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

RISK_REWARD_OPTIONS = ("", "1:1", "1:2", "1:3", "1:4", "1:5", "1:6", "1:7", "1:8", "1:9", "1:10")


def parse_number(raw: Any) -> Optional[float]:
    """
    Parse a numeric form field.

    Args:
        raw: Field value, usually a string

    Returns:
        The leading number of the field, or None if there is none
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        return float(raw)

    match = _LEADING_FLOAT.match(str(raw))
    if not match:
        return None
    return float(match.group(1))


def parse_direction(raw: Any) -> TradeDirection:
    """
    Parse the trade type field.

    Raises:
        MalformedDataError: If the value is neither BUY nor SELL
    """
    value = str(raw or "").strip().upper()
    try:
        return TradeDirection(value)
    except ValueError:
        raise MalformedDataError(
            f"Trade type must be BUY or SELL, got {raw!r}",
            raw_data=str(raw),
            expected_format="BUY|SELL",
        )


def _is_checked(raw: Any) -> bool:
    if isinstance(raw, str):
        return raw.strip().lower() in ("true", "on", "1", "yes")
    return bool(raw)


def _required_number(form: Mapping[str, Any], field_name: str) -> float:
    raw = form.get(field_name)
    if raw is None or str(raw).strip() == "":
        raise MissingDataError(f"{field_name} is required", field_name=field_name)

    value = parse_number(raw)
    if value is None:
        raise MalformedDataError(
            f"{field_name} is not a number: {raw!r}",
            raw_data=str(raw),
            expected_format="decimal number",
        )
    return value


def _parse_date(form: Mapping[str, Any], today: date) -> date:
    raw = form.get("date")
    if raw is None or str(raw).strip() == "":
        return today
    try:
        return parse_trade_date(raw)
    except (TypeError, ValueError):
        raise MalformedDataError(
            f"date is not an ISO date: {raw!r}",
            raw_data=str(raw),
            expected_format="YYYY-MM-DD",
        )


def parse_trade_form(
    form: Mapping[str, Any],
    trade_id: Optional[str] = None,
    created_at: Optional[str] = None,
    today: Optional[date] = None,
) -> Trade:
    """
    Build a Trade from submitted form fields.

    Expected keys: date, symbol, type, quantity, entryPrice, exitPrice,
    notes, screenshot, riskRewardRatio, isNoTrade. A blank exit price means
    the trade is still open.

    Args:
        form: Raw form fields
        trade_id: Keep this id when editing; a new one is generated otherwise
        created_at: Keep this creation time when editing
        today: Default trade date when the form leaves it blank

    Returns:
        Trade with profit_loss and pip_value filled in

    Raises:
        MissingDataError: If symbol, quantity or entry price is blank
        MalformedDataError: If a numeric, date or type field cannot be parsed
    """
    trade_date = _parse_date(form, today or today_local())
    notes = str(form.get("notes") or "")
    trade_id = trade_id or uuid.uuid4().hex
    created_at = created_at or utc_now_iso()

    if _is_checked(form.get("isNoTrade")):
        return Trade(
            id=trade_id,
            trade_date=trade_date,
            symbol=NO_TRADE_SYMBOL,
            direction=TradeDirection.BUY,
            lot_size=0.0,
            entry_price=0.0,
            exit_price=0.0,
            profit_loss=0.0,
            pip_value=0.0,
            notes=notes,
            is_no_trade=True,
            created_at=created_at,
        )

    symbol = str(form.get("symbol") or "").strip()
    if not symbol:
        raise MissingDataError("symbol is required", field_name="symbol")

    direction = parse_direction(form.get("type", TradeDirection.BUY.value))
    lot_size = _required_number(form, "quantity")
    if lot_size <= 0:
        raise MalformedDataError(
            f"quantity must be positive, got {lot_size}",
            raw_data=str(form.get("quantity")),
            expected_format="positive lot size",
        )
    entry_price = _required_number(form, "entryPrice")
    exit_price = parse_number(form.get("exitPrice")) or 0.0

    risk_reward = str(form.get("riskRewardRatio") or "")
    if risk_reward not in RISK_REWARD_OPTIONS:
        raise MalformedDataError(
            f"riskRewardRatio must look like 1:N, got {risk_reward!r}",
            raw_data=risk_reward,
            expected_format="1:1 .. 1:10",
        )

    return Trade(
        id=trade_id,
        trade_date=trade_date,
        symbol=symbol,
        direction=direction,
        lot_size=lot_size,
        entry_price=entry_price,
        exit_price=exit_price,
        profit_loss=compute_pl(symbol, lot_size, entry_price, exit_price, direction.value),
        pip_value=compute_pip_value(symbol, lot_size),
        notes=notes,
        risk_reward_ratio=risk_reward,
        screenshot=form.get("screenshot") or None,
        is_no_trade=False,
        created_at=created_at,
    )


def live_preview(form: Mapping[str, Any]) -> tuple[Optional[PairInfo], float]:
    """
    Pair info and running P/L shown while the form is being filled in.

    The P/L stays 0.0 until symbol, quantity, entry and exit are all present.
    Unparsable numbers are passed through as NaN, as the form would.
    """
    symbol = str(form.get("symbol") or "").strip()
    if not symbol:
        return None, 0.0

    info = describe(symbol)
    fields = [form.get(name) for name in ("quantity", "entryPrice", "exitPrice")]
    if any(value in (None, "") for value in fields):
        return info, 0.0

    parsed = [parse_number(raw) for raw in fields]
    lot_size, entry_price, exit_price = (
        float("nan") if value is None else value for value in parsed
    )
    direction = str(form.get("type") or TradeDirection.BUY.value).upper()
    return info, compute_pl(symbol, lot_size, entry_price, exit_price, direction)


def empty_form(today: Optional[date] = None) -> dict[str, Any]:
    """Blank form fields for a new trade."""
    return {
        "date": format_trade_date(today or today_local()),
        "symbol": "",
        "type": TradeDirection.BUY.value,
        "quantity": "",
        "entryPrice": "",
        "exitPrice": "",
        "notes": "",
        "screenshot": None,
        "riskRewardRatio": "",
        "isNoTrade": False,
    }


def trade_to_form(trade: Trade) -> dict[str, Any]:
    """Form fields pre-filled from an existing trade for editing."""
    return {
        "date": format_trade_date(trade.trade_date),
        "symbol": trade.symbol,
        "type": trade.direction.value,
        "quantity": repr(trade.lot_size),
        "entryPrice": repr(trade.entry_price),
        "exitPrice": repr(trade.exit_price),
        "notes": trade.notes,
        "screenshot": trade.screenshot,
        "riskRewardRatio": trade.risk_reward_ratio,
        "isNoTrade": trade.is_no_trade,
    }
