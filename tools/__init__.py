# =============================================================================
# tools/__init__.py
# =============================================================================
# This package contains the FastMCP tool wrappers.
#
# ARCHITECTURAL ROLE:
#   tools/ is the "translation layer" between the MCP host and the
#   generation engine in mockdata/.  mcp_server.py:
#     1. Declares the three tools and their input schemas
#     2. Forwards each call to mockdata.router.route()
#     3. Converts the GenerationResult into an MCP reply (text or isError)
#     4. Owns process-level concerns: logging to stderr, the shared Faker
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT generate values (that's mockdata/generators.py)
#   - They do NOT decide what is malformed (that's mockdata/router.py)
# =============================================================================
