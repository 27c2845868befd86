"""Process entry point for `python -m abstract_factory`."""

import sys

from abstract_factory.domain.errors import ConfigurationError
from abstract_factory.main import main


def run() -> None:
    try:
        exit_code = main()
    except ConfigurationError as e:
        print(f"abstract-factory: {e.message}", file=sys.stderr)
        exit_code = 2
    sys.exit(exit_code)


if __name__ == "__main__":
    run()
