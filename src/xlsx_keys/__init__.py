"""xlsx-keys: extract identifier-like keys from spreadsheet cells and formulas."""

# Harden stdlib XML parsers against XXE, entity expansion bombs, and DTD
# retrieval *before* openpyxl is imported.
import defusedxml

defusedxml.defuse_stdlib()

__version__ = "0.1.0"
