import pytest
from pydantic import ValidationError

from guidelines_mcp.config import DEFAULT_GUIDELINES_URL, Settings


def test_defaults_match_published_guidelines(monkeypatch):
    monkeypatch.delenv("GUIDELINES_MCP_GUIDELINES_URL", raising=False)
    settings = Settings(_env_file=None)
    assert settings.guidelines_url == DEFAULT_GUIDELINES_URL
    assert settings.tool_name == "readSwiftGuidelines"
    assert settings.server_name == "swift-api-guidelines"


def test_env_prefix_overrides(monkeypatch):
    monkeypatch.setenv("GUIDELINES_MCP_SECTION_LINE_LIMIT", "10")
    monkeypatch.setenv("GUIDELINES_MCP_NOT_FOUND_SAMPLE_CHARS", "20")
    config = Settings(_env_file=None).extraction_config()
    assert config.line_cap == 10
    assert config.sample_length == 20


def test_unknown_transport_rejected():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, transport="carrier-pigeon")


def test_line_limit_must_be_positive():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, section_line_limit=0)
