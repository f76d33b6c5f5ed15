import re
import logging
from typing import Optional
from urllib.parse import quote
import requests
from bs4 import BeautifulSoup

from config import get_settings
from schemas import JobDescription

logger = logging.getLogger(__name__)

CONTENT_SELECTORS = ("main", "article", ".job-description", "#job-description")
SECTION_PATTERN = re.compile(r"job description|requirements|responsibilities", re.IGNORECASE)
SECTION_WINDOW = 4000
MAX_CHARS = 5000


class JobFetchError(Exception):
    """Fetching a posting failed. The message is shown to the user as-is."""

    def __init__(self, message: str, url: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


def extract_job_text(html: str) -> str:
    """
    Pull the readable job description out of a posting page.
    Picks the main content region, collapses whitespace, then either windows
    the text at the first description/requirements heading or caps its length.
    """
    soup = BeautifulSoup(html, "html.parser")
    for tag in soup(["script", "style"]):
        tag.decompose()

    region = soup
    for selector in CONTENT_SELECTORS:
        found = soup.select_one(selector)
        if found is not None:
            region = found
            break

    text = re.sub(r"\s+", " ", region.get_text(" ")).strip()

    # A heading at position 0 leaves the text as it is
    m = SECTION_PATTERN.search(text)
    if m and m.start():
        text = text[m.start():m.start() + SECTION_WINDOW]
    elif len(text) > MAX_CHARS:
        text = text[:MAX_CHARS] + "..."
    return text


def fetch_job_posting(url: str, session: Optional[requests.Session] = None) -> JobDescription:
    """Fetch a posting through the CORS relay. One attempt, no retry."""
    url = (url or "").strip()
    if not url:
        raise JobFetchError("Please enter a job posting URL.", url)

    settings = get_settings()
    proxy_url = f"{settings.cors_proxy_url}{quote(url, safe='')}"
    http = session or requests

    try:
        response = http.get(proxy_url, timeout=settings.http_timeout)
    except requests.exceptions.RequestException as e:
        logger.error(f"Error fetching job posting {url}: {e}")
        raise JobFetchError("Failed to extract job description from URL", url) from e

    if response.status_code == 403:
        raise JobFetchError(
            "Access denied: The website is blocking automated access. "
            "Please use the 'Paste Text' option instead.", url, 403)
    if response.status_code == 404:
        raise JobFetchError("Job posting not found. Please check the URL and try again.", url, 404)
    if not response.ok:
        raise JobFetchError(f"Failed to fetch URL: {response.status_code}", url, response.status_code)

    text = extract_job_text(response.text)
    logger.info(f"Job description extracted from {url}, length: {len(text)}")
    return JobDescription(source_url=url, raw_text=text)
