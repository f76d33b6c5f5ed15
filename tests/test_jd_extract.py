import pytest
import requests

from parsers.jd_extract import extract_job_text, fetch_job_posting, JobFetchError

URL = "https://example.com/jobs/42?ref=board"


def test_prefers_main_region_and_drops_scripts():
    html = """
    <html><head><style>.x{color:red}</style></head>
    <body><nav>Home Careers</nav>
    <main><h1>Data Engineer</h1><script>track()</script><p>Build   pipelines</p></main>
    </body></html>"""
    text = extract_job_text(html)
    assert text == "Data Engineer Build pipelines"


def test_selector_order_article_before_class():
    html = '<div class="job-description">Class block</div><article>Article block</article>'
    assert extract_job_text(html) == "Article block"


def test_id_selector_used_when_nothing_else():
    html = '<div>Header</div><section id="job-description">Ship features</section>'
    assert extract_job_text(html) == "Ship features"


def test_falls_back_to_whole_document():
    assert extract_job_text("<div>Alpha</div><div>Beta</div>") == "Alpha Beta"


def test_windows_at_first_section_heading():
    html = "<main>" + "Company blurb. " * 50 + "Requirements: " + "Python " * 1000 + "</main>"
    text = extract_job_text(html)
    assert text.startswith("Requirements:")
    assert len(text) == 4000


def test_truncates_long_text_without_heading():
    html = "<main>" + "lorem " * 2000 + "</main>"
    text = extract_job_text(html)
    assert len(text) == 5003
    assert text.endswith("...")


def test_fetch_goes_through_encoded_proxy(monkeypatch, fake_response):
    seen = {}

    def get(url, timeout=None):
        seen["url"] = url
        return fake_response(200, text="<main>Backend role with Go</main>")

    monkeypatch.setattr("parsers.jd_extract.requests.get", get)
    job = fetch_job_posting(URL)
    assert seen["url"] == "https://corsproxy.io/?https%3A%2F%2Fexample.com%2Fjobs%2F42%3Fref%3Dboard"
    assert job.raw_text == "Backend role with Go"
    assert job.source_url == URL


@pytest.mark.parametrize("status,fragment", [
    (403, "Access denied"),
    (404, "not found"),
    (500, "Failed to fetch URL: 500"),
])
def test_http_errors_map_to_messages(monkeypatch, fake_response, status, fragment):
    monkeypatch.setattr("parsers.jd_extract.requests.get",
                        lambda url, timeout=None: fake_response(status, text="nope"))
    job_text = "previously pasted description"
    with pytest.raises(JobFetchError) as exc:
        job_text = fetch_job_posting(URL).raw_text
    assert fragment in str(exc.value)
    assert exc.value.status_code == status
    assert exc.value.url == URL
    assert job_text == "previously pasted description"


def test_network_failure(monkeypatch):
    def get(url, timeout=None):
        raise requests.exceptions.ConnectionError("down")
    monkeypatch.setattr("parsers.jd_extract.requests.get", get)
    with pytest.raises(JobFetchError, match="Failed to extract job description"):
        fetch_job_posting(URL)


def test_empty_url_is_rejected():
    with pytest.raises(JobFetchError):
        fetch_job_posting("   ")
