"""Module entrypoint for `python -m yajsv`.

Delegates to the CLI implementation.
"""

from .cli import run


if __name__ == "__main__":
    run()
