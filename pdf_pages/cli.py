import argparse
import math
from typing import List, Optional

from pdf_pages import __version__
from pdf_pages.config import ConversionRequest
from pdf_pages.convert import convert_pdf
from pdf_pages.errors import ConversionError
from pdf_pages.log import build_logger
from pdf_pages.pages import parse_page_list


def positive_float(text: str) -> float:
    try:
        value = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid scale: {text!r}")
    if not (math.isfinite(value) and value > 0):
        raise argparse.ArgumentTypeError(f"scale must be a positive finite number: {text!r}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pdf-pages", description="Convert PDF files to PNG or SVG"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-q", "--quiet", action="store_true", help="Suppress informational logging (only errors printed)"
    )
    parser.add_argument(
        "-p",
        "--page",
        dest="pages",
        metavar="PAGE",
        type=parse_page_list,
        action="extend",
        default=[],
        help="Pages to convert (1-based). Repeat or separate with commas; omit for all pages",
    )
    parser.add_argument(
        "-s", "--scale", type=positive_float, default=1.0, help="Scale factor applied to outputs (default 1.0)"
    )
    parser.add_argument("--prefix", help="Prefix for output files. If omitted, inferred from the input name")
    parser.add_argument("format", metavar="FORMAT", type=str.lower, choices=["png", "svg"], help="Output format")
    parser.add_argument("input", metavar="INPUT", help="Input PDF file")
    parser.add_argument("output", metavar="OUTPUT", nargs="?", default=".", help="Output directory")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    request = ConversionRequest(
        output_format=args.format,
        input_path=args.input,
        output_dir=args.output,
        pages=args.pages,
        scale=args.scale,
        prefix=args.prefix,
        quiet=args.quiet,
    )
    logger = build_logger(request.quiet)

    try:
        convert_pdf(request, logger)
    except ConversionError as exc:
        logger.error("%s", exc, extra={"tag": exc.tag})
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
