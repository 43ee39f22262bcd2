"""Module entrypoint for ``python -m projecttree``.

All argument parsing and scanning happen in ``projecttree.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
