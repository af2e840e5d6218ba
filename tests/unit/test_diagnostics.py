from __future__ import annotations

import pytest

from oecd_sdmx_client.core.diagnostics import FILTER_SYNTAX_RULES, build_diagnostic


@pytest.mark.parametrize(
    ("status", "message_fragment"),
    [
        (400, "Bad request"),
        (404, "not found"),
        (422, "Invalid filter format"),
        (429, "Rate limit exceeded"),
        (500, "server error"),
        (502, "server error"),
        (503, "server error"),
        (418, "Unexpected error"),
    ],
)
def test_each_status_family_has_message_and_suggestions(status, message_fragment):
    diagnostic = build_diagnostic(status, dataflow_id="QNA", provided_filter="USA..")
    assert message_fragment in diagnostic.message
    assert len(diagnostic.suggestions) >= 3
    rendered = diagnostic.to_dict()
    assert rendered["statusCode"] == status
    assert rendered["dataflowId"] == "QNA"
    assert rendered["providedFilter"] == "USA.."


def test_422_carries_filter_syntax_rules_and_first_step():
    rendered = build_diagnostic(422, dataflow_id="QNA").to_dict()
    assert rendered["filterSyntax"] == dict(FILTER_SYNTAX_RULES)
    assert "cause" in rendered
    assert rendered["recommendedFirstStep"] == 'get_data_structure({dataflow_id: "QNA"})'
    assert "last_n_observations: 10" in rendered["simpleQueryExample"]


def test_only_422_carries_filter_syntax():
    for status in (400, 404, 429, 500, 418):
        assert "filterSyntax" not in build_diagnostic(status).to_dict()


def test_429_and_5xx_extras():
    assert build_diagnostic(429).to_dict()["retryAfter"] == "5 seconds"
    assert build_diagnostic(503).to_dict()["checkStatus"] == "https://data.oecd.org/"


def test_build_diagnostic_is_pure():
    assert build_diagnostic(404, dataflow_id="MEI") == build_diagnostic(404, dataflow_id="MEI")
