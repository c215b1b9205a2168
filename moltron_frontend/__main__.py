"""Allow ``python -m moltron_frontend``."""

from moltron_frontend.cli import run

if __name__ == "__main__":
    run()
