from pageobjectgen.runtime_checks import _is_missing_browser_error, _is_timeout_error, is_http_url, normalize_url


def test_missing_browser_error_detection() -> None:
    exc = RuntimeError("BrowserType.launch: Executable doesn't exist at /tmp/chromium")
    assert _is_missing_browser_error(exc)
    assert _is_missing_browser_error(RuntimeError("Please run the following command to download new browsers"))
    assert not _is_missing_browser_error(RuntimeError("net::ERR_NAME_NOT_RESOLVED"))


def test_timeout_error_detection() -> None:
    assert _is_timeout_error(RuntimeError("Page.goto: Timeout 30000ms exceeded."))
    assert not _is_timeout_error(RuntimeError("net::ERR_CONNECTION_REFUSED"))


def test_is_http_url() -> None:
    assert is_http_url("https://example.com")
    assert is_http_url(" http://localhost:8080/login ")
    assert not is_http_url("ftp://example.com")
    assert not is_http_url("example.com")
    assert not is_http_url("https://")
    assert not is_http_url(None)


def test_normalize_url_adds_root_path() -> None:
    assert normalize_url("https://example.com") == "https://example.com/"
    assert normalize_url("https://example.com?q=1") == "https://example.com/?q=1"
    assert normalize_url(" https://example.com/login ") == "https://example.com/login"
