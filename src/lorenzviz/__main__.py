"""Command-line interface."""
from lorenzviz.main import main

if __name__ == "__main__":
    main()
