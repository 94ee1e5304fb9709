"""Entry point for running with python -m mdtoc."""

from mdtoc.cli import run

if __name__ == "__main__":
    run()
