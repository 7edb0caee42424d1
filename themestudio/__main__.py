"""Entry point for `python -m themestudio`."""

import sys


def main():
    from themestudio.app import run_cli
    sys.exit(run_cli())


if __name__ == "__main__":
    main()
