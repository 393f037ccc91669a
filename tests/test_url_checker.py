import pytest

from dep12.url_checker import is_valid_url


@pytest.mark.parametrize(
    "url",
    [
        "https://github.com/merkys/Debian-DEP12/issues",
        "http://example.org",
        "https://example.org/search?q=dep12&lang=en#results",
        "git://anonscm.debian.org/collab-maint/foo.git",
        "mailto:security@example.org",
        "https://example.org/%7Euser/",
        "ftp://[2001:db8::1]/pub/",
    ],
)
def test_valid_urls(url):
    assert is_valid_url(url)


@pytest.mark.parametrize(
    "url",
    [
        "",
        "not a url",
        "example.org/issues",
        "https://example.org/issues\n",
        "https://example.org/100%",
        "https://example.org/%zz",
        "1http://example.org",
        "http://[::1/path",
        None,
        42,
    ],
)
def test_invalid_urls(url):
    assert not is_valid_url(url)
