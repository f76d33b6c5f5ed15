import io
import re
import logging
import fitz  # PyMuPDF
from PyPDF2 import PdfReader

logger = logging.getLogger(__name__)

# A heuristic result shorter than this falls through to the next one
MIN_HEURISTIC_CHARS = 100


def pdf_to_text(source) -> str:
    """
    Extract text from a PDF with a real parser.
    Works with file paths, raw bytes and in-memory file-like objects (uploads).
    Returns "" when neither PyMuPDF nor PyPDF2 can read the document.
    """
    if isinstance(source, str):
        with open(source, "rb") as f:
            data = f.read()
    elif isinstance(source, (bytes, bytearray)):
        data = bytes(source)
    else:
        data = source.read()

    # ---------- Attempt 1: PyMuPDF ----------
    try:
        doc = fitz.open(stream=io.BytesIO(data), filetype="pdf")
        text = "\n".join(page.get_text("text") for page in doc)
        doc.close()
        if text.strip():
            logger.info(f"Extracted {len(text)} characters via PyMuPDF")
            return text.strip()
    except Exception as e:
        logger.warning(f"PyMuPDF extraction failed: {e}")

    # ---------- Attempt 2: PyPDF2 ----------
    try:
        reader = PdfReader(io.BytesIO(data))
        text = "\n".join(page.extract_text() or "" for page in reader.pages)
        if text.strip():
            logger.info(f"Extracted {len(text)} characters via PyPDF2 fallback")
            return text.strip()
    except Exception as e:
        logger.warning(f"PyPDF2 extraction failed: {e}")

    return ""


def _from_parentheses(content: str) -> str:
    # Text objects in uncompressed content streams look like (Hello) Tj
    tokens = re.findall(r"\([^)]+\)", content)
    if not tokens:
        return ""
    text = " ".join(tokens)
    text = re.sub(r"[()]", " ", text)
    text = re.sub(r"\\n|\\r", " ", text)
    return re.sub(r"\s+", " ", text)


def _from_text_arrays(content: str) -> str:
    arrays = re.findall(r"/Text\s*\[.*?\]", content)
    if not arrays:
        return ""
    text = " ".join(arrays)
    text = re.sub(r"/Text\s*\[", "", text)
    text = text.replace("]", "")
    return re.sub(r"[()]", " ", text)


def _printable_words(content: str) -> str:
    text = re.sub(r"[^\x20-\x7E]", " ", content)
    text = " ".join(word for word in text.split(" ") if len(word) > 2)
    return re.sub(r"\s+", " ", text).strip()


def scrape_pdf_text(data: bytes) -> str:
    """
    Best-effort regex scraping of raw PDF bytes.

    This is not a PDF parser: it can pick up structural syntax as well as
    prose. It is used only when pdf_to_text() finds nothing usable.
    Heuristics run in order and the first one reaching MIN_HEURISTIC_CHARS wins;
    otherwise the result of the last heuristic that ran is returned.
    """
    content = data.decode("utf-8", errors="replace")

    text = _from_parentheses(content)
    if len(text) < MIN_HEURISTIC_CHARS:
        text = _from_text_arrays(content) or text
    if len(text) < MIN_HEURISTIC_CHARS:
        text = _printable_words(content)

    logger.info(f"Scraped {len(text)} characters from raw PDF bytes")
    return text
