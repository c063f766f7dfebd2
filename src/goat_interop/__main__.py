"""Allow running the package with ``python -m goat_interop``."""

from goat_interop.main import main

main()
