from __future__ import annotations

"""Delimiter processing package.

This package encapsulates delimiter-matching concerns of the inline parser:
- Strategy contract (base) and concrete strategies (emphasis)
- Staggered dispatch by minimum run length
- Char -> strategy registry and JSON configuration
- Reporting (Markdown dispatch table)

Registration happens once during setup; lookups are read-only afterwards.
"""
