# =============================================================================
# core/__init__.py
# =============================================================================
# All business logic for the travel recommendation search.
#
#   models.py   frozen catalog types and the ResultRecord
#   catalog.py  one-time catalog load and the published snapshot
#   search.py   intent classification, matching, de-duplication
#   results.py  search outcome (status, messages) for front ends
#
# Nothing in this package imports FastMCP or any front-end code.
# =============================================================================
