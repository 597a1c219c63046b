# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Domain types and table definitions."""
