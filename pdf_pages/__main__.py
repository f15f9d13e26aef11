import sys

from pdf_pages.cli import main


if __name__ == "__main__":
    sys.exit(main())
