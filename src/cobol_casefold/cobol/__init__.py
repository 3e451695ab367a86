"""
COBOL-specific modules for the case folder.

This package contains COBOL language handling:
- column_handler: Fixed-format card reading and classification
"""
