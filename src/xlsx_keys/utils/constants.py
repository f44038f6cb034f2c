"""Limits and application constants."""

# Used-range guard: sheets whose declared dimension exceeds this many cells
# are refused before any cell is visited
MAX_CELLS = 5_000_000

# Memory management
MAX_MEMORY_MB = 2048

# Supported file extensions
OPENXML_EXTENSIONS = {".xlsx", ".xlsm"}
LEGACY_EXTENSIONS = {".xlsb", ".xls", ".ods"}
EXCEL_EXTENSIONS = OPENXML_EXTENSIONS | LEGACY_EXTENSIONS
DEFAULT_EXTENSION = ".xlsx"

# Export naming
EXPORT_SUFFIX = "-keys.json"
EXPORT_FALLBACK_NAME = "excel-keys"

# Number of keys echoed in the log summary
KEYS_PREVIEW_COUNT = 10

ENV_MAX_CELLS = "XLSX_KEYS_MAX_CELLS"
