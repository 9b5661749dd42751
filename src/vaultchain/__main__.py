"""Module entry point for ``python -m vaultchain``."""

from __future__ import annotations

from vaultchain.cli import main

if __name__ == "__main__":
    main()
