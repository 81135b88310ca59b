"""Allow running the CLI with python -m line_route_map."""

from line_route_map.cli import main

if __name__ == "__main__":
    main()
