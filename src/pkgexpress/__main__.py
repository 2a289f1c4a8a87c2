"""Allow ``python -m pkgexpress``."""

from pkgexpress.cli import main

main()
