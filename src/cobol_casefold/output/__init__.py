"""
Output modules for the case folder.

This package contains output handling:
- report: Run summary and JSON report
"""
