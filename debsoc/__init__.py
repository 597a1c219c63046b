# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Debsoc backend: membership, attendance and anonymous feedback for a debating society."""
