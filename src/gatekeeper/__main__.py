"""Entry point for 'python -m gatekeeper' command."""

from gatekeeper.cli import main

if __name__ == "__main__":
    main()
