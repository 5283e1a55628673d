"""Diagnostics package.

- diagnostics: always available, light-weight checks (no ephemeris)
- diagnostics.ephem: optional (requires ephemeris extras, downloads DE421 on first use)
"""

__all__ = ["annual_table", "annual_plot"]
