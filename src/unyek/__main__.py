"""Allow running unyek with python -m unyek."""

from unyek.cli import main

main()
