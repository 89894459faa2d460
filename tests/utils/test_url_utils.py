from __future__ import annotations

import pytest

from deepl_bindings.models.config_models import FREE_SERVER_URL, PRO_SERVER_URL
from deepl_bindings.utils.url_utils import UrlUtils


@pytest.mark.parametrize(("key", "expected"), [("abc:fx", True), ("abc", False), ("fx:abc", False)])
def test_is_free_account_key(key: str, expected: bool) -> None:
    assert UrlUtils.is_free_account_key(key) is expected


def test_select_server_url_defaults() -> None:
    assert UrlUtils.select_server_url("abc:fx") == FREE_SERVER_URL
    assert UrlUtils.select_server_url("abc") == PRO_SERVER_URL
    assert UrlUtils.select_server_url("abc:fx", "https://proxy.test/deepl") == "https://proxy.test/deepl/"


@pytest.mark.parametrize(
    "url",
    ["", "api.deepl.com/v2/", "ftp://api.deepl.com/v2/", "https://api.deepl.com/v2/?a=1", "https:///v2/"],
)
def test_normalize_server_url_rejects(url: str) -> None:
    with pytest.raises(ValueError):
        UrlUtils.normalize_server_url(url)


def test_path_segment_quotes_separators() -> None:
    assert UrlUtils.path_segment("a/b c") == "a%2Fb%20c"
    assert UrlUtils.path_segment("04DE5AD9") == "04DE5AD9"
