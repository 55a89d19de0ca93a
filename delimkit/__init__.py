"""Delimiter matching toolkit for inline-markup parsers."""
