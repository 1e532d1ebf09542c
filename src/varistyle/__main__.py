"""Run the varistyle CLI with ``python -m varistyle``."""

from varistyle.cli import main

if __name__ == "__main__":
    main()
