"""Utilities for promptree."""

from promptree.utils.parsers import enum_parser, parse_bool, split_values

__all__ = ["enum_parser", "parse_bool", "split_values"]
