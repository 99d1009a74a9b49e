"""Entry point for the react_test_generator package."""

import sys
from react_test_generator.cli import main

if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        print("\nOperation cancelled by user.")
        sys.exit(130)
