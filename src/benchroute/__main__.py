"""CLI entry point: python -m benchroute [command]"""
from benchroute.cli import main

if __name__ == "__main__":
    main()
