# =============================================================================
# tools/__init__.py
# =============================================================================
# FastMCP tool wrappers around core/.
#
# Each tool:
#   1. Calls a pure function from core/
#   2. Converts the result to a plain dict for JSON transport
#   3. Logs the call and the response on stderr
#
# Tools contain no search logic of their own; the same answers come out of
# the CLI in main.py because both go through core.results.run_search.
# =============================================================================
