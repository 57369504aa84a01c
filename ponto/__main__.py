"""Allow ``python -m ponto``."""

from ponto.cli.main import main

if __name__ == "__main__":
    main()
