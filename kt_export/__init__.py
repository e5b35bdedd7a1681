"""Tabular file writers for transmittal tables."""
