import fitz  # PyMuPDF

from pdf_pages.errors import ConversionError, ErrorKind

PDF_SIGNATURE = b"%PDF-"


def sniff_pdf(data: bytes) -> bool:
    return data.startswith(PDF_SIGNATURE)


def open_document(data: bytes) -> fitz.Document:
    try:
        return fitz.open(stream=data, filetype="pdf")
    except (RuntimeError, ValueError) as exc:
        raise ConversionError(ErrorKind.PDF, f"Failed to read PDF: {exc}") from exc


def render_png(page: fitz.Page, scale: float) -> bytes:
    try:
        pix = page.get_pixmap(matrix=fitz.Matrix(scale, scale))
        return pix.tobytes("png")
    except Exception as exc:
        raise ConversionError(ErrorKind.PDF, f"Failed to render page: {exc}") from exc


def render_svg(page: fitz.Page) -> str:
    try:
        return page.get_svg_image(matrix=fitz.Identity)
    except Exception as exc:
        raise ConversionError(ErrorKind.PDF, f"Failed to render page: {exc}") from exc
