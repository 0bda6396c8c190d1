"""Allow running mathcli as `python -m mathcli`."""

from mathcli.cli import main

if __name__ == "__main__":
    main()
