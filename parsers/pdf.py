import io
import logging

import fitz  # PyMuPDF

logger = logging.getLogger(__name__)


class PdfExtractionError(Exception):
    """The uploaded file could not be turned into text."""


def pdf_to_text(source) -> str:
    """
    Extract text from a PDF.
    Works with file paths (str), raw bytes and in-memory file-like objects (Streamlit / FastAPI uploads).
    Raises PdfExtractionError when the file cannot be read or holds no text layer.
    """
    try:
        if isinstance(source, str):
            doc = fitz.open(source)
        elif isinstance(source, (bytes, bytearray)):
            doc = fitz.open(stream=bytes(source), filetype="pdf")
        else:
            # file-like object from an uploader
            doc = fitz.open(stream=io.BytesIO(source.read()), filetype="pdf")
    except Exception as e:
        logger.warning("PDF extraction failed: %s", e)
        raise PdfExtractionError(f"Could not open PDF: {e}") from e

    try:
        text = "\n".join(page.get_text("text") for page in doc)
    except Exception as e:
        logger.warning("PDF extraction failed: %s", e)
        raise PdfExtractionError(f"Could not read PDF pages: {e}") from e
    finally:
        doc.close()

    text = text.strip()
    if not text:
        # scanned documents have no text layer
        raise PdfExtractionError("No text found in PDF")
    return text
