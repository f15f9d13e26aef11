import logging
import re
import sys
from pathlib import Path
from typing import Callable, Iterable

import fitz  # PyMuPDF

from pdf_pages.config import ConversionRequest
from pdf_pages.errors import ConversionError, ErrorKind
from pdf_pages.pages import Selection, validate_requested_pages
from pdf_pages.prefix import resolve_prefix
from pdf_pages.render import open_document, render_png, render_svg, sniff_pdf

OUTPUT_TAG = "Output"

# plain decimal or exponent form; no whitespace or digit separators
NUMBER_RE = re.compile(r"[+-]?(?:inf|infinity|nan|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)", re.IGNORECASE)


def _rescale_attribute(markup: str, name: str, scale: float) -> str:
    marker = f'{name}="'
    pos = markup.find(marker)
    if pos == -1:
        return markup
    start = pos + len(marker)
    end = markup.find('"', start)
    if end == -1:
        return markup
    raw = markup[start:end]
    if not NUMBER_RE.fullmatch(raw):
        return markup
    value = float(raw)
    return f"{markup[:start]}{value * scale:.6f}{markup[end:]}"


def rescale_svg(markup: str, scale: float) -> str:
    """Multiply the first width and height attributes of ``markup`` by ``scale``.

    Missing or non-numeric attributes are left as they are.
    """
    if abs(scale - 1.0) <= sys.float_info.epsilon:
        return markup
    markup = _rescale_attribute(markup, "width", scale)
    return _rescale_attribute(markup, "height", scale)


def prepare_output_dir(output_dir: Path, logger: logging.Logger) -> None:
    existed = output_dir.exists()
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise ConversionError(
            ErrorKind.FILE_SYSTEM, f"Failed to create output directory: {exc}"
        ) from exc
    if not existed:
        logger.info("Created output directory: %s", output_dir, extra={"tag": OUTPUT_TAG})


def load_document(input_path: Path) -> fitz.Document:
    try:
        data = input_path.read_bytes()
    except OSError as exc:
        raise ConversionError(ErrorKind.FILE_SYSTEM, f"Failed to read input file: {exc}") from exc

    if not sniff_pdf(data):
        raise ConversionError(ErrorKind.FILE_TYPE, "Input file is not a PDF")

    return open_document(data)


def _write(path: Path, content, label: str) -> None:
    try:
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_bytes(content)
    except OSError as exc:
        raise ConversionError(ErrorKind.FILE_SYSTEM, f"Failed to write {label}: {exc}") from exc


def convert_pages(
    document: Iterable,
    output_format: str,
    selection: Selection,
    scale: float,
    prefix: str,
    output_dir: Path,
    png_renderer: Callable = render_png,
    svg_renderer: Callable = render_svg,
) -> int:
    """Render the selected pages of ``document`` in order and write one file each.

    Output files are named ``{prefix}{page_number}.{format}`` with 1-based page
    numbers. The first failed write aborts the run. Returns the number of files
    written.
    """
    written = 0
    for page_index, page in enumerate(document):
        if selection is not None and page_index not in selection:
            continue

        out_path = output_dir / f"{prefix}{page_index + 1}.{output_format}"
        if output_format == "png":
            _write(out_path, png_renderer(page, scale), "PNG")
        else:
            svg = rescale_svg(svg_renderer(page), scale)
            _write(out_path, svg, "SVG")
        written += 1

    return written


def log_render_summary(
    logger: logging.Logger, kind: str, count: int, output_dir: Path, input_path: Path
) -> None:
    suffix = "" if count == 1 else "s"
    logger.info(
        "Wrote %d %s file%s to %s (input: %s)",
        count,
        kind,
        suffix,
        output_dir,
        input_path,
        extra={"tag": OUTPUT_TAG},
    )


def convert_pdf(request: ConversionRequest, logger: logging.Logger) -> int:
    prepare_output_dir(request.output_dir, logger)

    doc = load_document(request.input_path)
    try:
        selection = validate_requested_pages(request.pages, len(doc))
        prefix = resolve_prefix(request.prefix, request.input_path)
        count = convert_pages(
            doc,
            request.output_format,
            selection,
            request.scale,
            prefix,
            request.output_dir,
        )
    finally:
        doc.close()

    log_render_summary(
        logger, request.output_format.upper(), count, request.output_dir, request.input_path
    )
    return count
