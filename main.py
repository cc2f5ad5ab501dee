# =============================================================================
# main.py  -  Entry Point for the Mock Data MCP Server
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py
#
# WHAT HAPPENS:
#   1. Loads environment variables from .env (MOCK_DATA_SEED, ...)
#   2. Configures stderr logging
#   3. Serves generateCustomData / generatePerson / generateCompany over stdio
#
# HOOKING IT UP TO A HOST:
#   Point your MCP client at this script as a stdio server, e.g.
#
#     {"command": "uv", "args": ["run", "python", "/path/to/main.py"]}
#
#   The host starts it as a subprocess and talks JSON-RPC over stdin/stdout.
# =============================================================================

import logging
import sys

from dotenv import load_dotenv

# Load environment variables from .env BEFORE the settings are read.
load_dotenv()

from tools.mcp_server import main as run_server


def main() -> None:
    try:
        run_server()
    except KeyboardInterrupt:
        logging.info("Mock Data MCP Server stopped")
    except Exception:
        logging.exception("Fatal error running server")
        sys.exit(1)


# =============================================================================
# Script entry point
# =============================================================================
if __name__ == "__main__":
    main()
