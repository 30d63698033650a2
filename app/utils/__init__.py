"""Utility helper functions."""

from app.utils.helpers import client_ip, get_summary, host, today_str
from app.utils.ip import encode_ip, parse_int_prefix

__all__ = [
    "client_ip",
    "encode_ip",
    "get_summary",
    "host",
    "parse_int_prefix",
    "today_str",
]
