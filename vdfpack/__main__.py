"""Module entrypoint for ``python -m vdfpack``.

This keeps module-mode execution behavior identical to the CLI script.
All argument parsing and build setup happen in ``vdfpack.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
