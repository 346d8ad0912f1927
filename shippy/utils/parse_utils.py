# utils/parse_utils.py
from shippy import config


def parse_float(text) -> float:
    """'599.5' -> 599.5, '' / 'abc' -> 0"""
    try:
        return float(str(text).strip())
    except ValueError:
        return 0.0


def money(value) -> str:
    """170000 -> '₹170,000', 599.5 -> '₹599.50'"""
    if float(value).is_integer():
        return f"{config.CURRENCY}{int(value):,}"
    return f"{config.CURRENCY}{value:,.2f}"
