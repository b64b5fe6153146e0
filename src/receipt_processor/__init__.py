"""Shared spending ledger built from plain text receipt files"""
from .accounting import aggregate, calculate_settlement, participants, resolve_person
from .class_models import Item, Ledger, Receipt, Settlement
from .exceptions import FileEmptyError, FileReadError, ReceiptFormatError, ReceiptParseError
from .price import format_price, parse_price
from .receipt_parser import parse_item, parse_receipt, parse_receipts

__all__ = [
    "Item",
    "Ledger",
    "Receipt",
    "Settlement",
    "FileEmptyError",
    "FileReadError",
    "ReceiptFormatError",
    "ReceiptParseError",
    "aggregate",
    "calculate_settlement",
    "format_price",
    "parse_item",
    "parse_price",
    "parse_receipt",
    "parse_receipts",
    "participants",
    "resolve_person",
]
