"""Allow ``python -m simple_mcp``."""

from simple_mcp.cli import main

if __name__ == "__main__":
    main()
