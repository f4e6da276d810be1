# src/uniqopy/__main__.py
from uniqopy.cli import main

if __name__ == "__main__":
    main()
