# =============================================================================
# mockdata/__init__.py
# =============================================================================
# This package contains ALL generation logic for the mock data server.
#
# CRITICAL ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP or any protocol framework.
#   Every module here is plain Python plus Faker, so the dispatch engine can
#   be exercised from a REPL or a unit test without starting a server.
#
# The layers, leaves first:
#   catalog.py     the closed vocabulary of field type tags
#   context.py     the random source + clock handed to every generator
#   generators.py  one function per tag, registered in a table
#   dispatcher.py  tag -> generator, with per-field failure isolation
#   records.py     fixed person / company recipes (nested address)
#   router.py      tool name + argument bag -> GenerationResult
# =============================================================================
