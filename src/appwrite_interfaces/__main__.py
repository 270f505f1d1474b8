"""CLI entry point: python -m appwrite_interfaces --input=FILE --output=DIR."""

from appwrite_interfaces.cli import main

if __name__ == "__main__":
    main()
