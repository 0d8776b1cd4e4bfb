from __future__ import annotations

from pathlib import Path

import allure
import pytest

from ai_linter.config import AgentSettings, ScanSettings, Settings

pytestmark = [
    allure.epic("Configuration"),
    allure.feature("Settings"),
]


def test_from_env_defaults() -> None:
    settings = Settings.from_env()

    assert settings.project_path == Path(".")
    assert settings.agent == AgentSettings()
    assert settings.agent.name == "claude"
    assert settings.agent.concurrency == 5
    assert settings.agent.max_retries == 3
    assert settings.agent.model_fast is None
    assert settings.scan.rule_file_name == ".ai-linter.md"
    assert settings.scan.excluded_dirs == ("node_modules",)
    assert settings.scan.output_path == Path("ai-linter-report.md")
    settings.validate()


def test_from_env_reads_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AI_LINTER_AGENT", " Qwen ")
    monkeypatch.setenv("AI_LINTER_CONCURRENCY", "2")
    monkeypatch.setenv("AI_LINTER_MAX_RETRIES", "5")
    monkeypatch.setenv("AI_LINTER_MODEL_FAST", "qwen-turbo")
    monkeypatch.setenv("AI_LINTER_MODEL_REVIEW", "  ")
    monkeypatch.setenv("AI_LINTER_VERBOSE", "yes")
    monkeypatch.setenv("AI_LINTER_EXCLUDED_DIRS", "node_modules, vendor,,vendor")
    monkeypatch.setenv("AI_LINTER_OUTPUT", "out/report.md")

    settings = Settings.from_env(project_path=Path("repo"))

    assert settings.project_path == Path("repo")
    assert settings.agent.name == "qwen"
    assert settings.agent.concurrency == 2
    assert settings.agent.max_retries == 5
    assert settings.agent.model_fast == "qwen-turbo"
    assert settings.agent.model_review is None
    assert settings.agent.verbose is True
    assert settings.scan.excluded_dirs == ("node_modules", "vendor")
    assert settings.scan.output_path == Path("out/report.md")


def test_from_env_rejects_invalid_integer(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AI_LINTER_CONCURRENCY", "many")

    with pytest.raises(ValueError, match="Invalid integer value for AI_LINTER_CONCURRENCY"):
        Settings.from_env()


def test_from_env_rejects_invalid_boolean(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AI_LINTER_VERBOSE", "maybe")

    with pytest.raises(ValueError, match="Invalid boolean value for AI_LINTER_VERBOSE"):
        Settings.from_env()


@pytest.mark.parametrize(
    ("settings", "message"),
    [
        (Settings(agent=AgentSettings(name="gpt")), "Unsupported agent 'gpt'"),
        (Settings(agent=AgentSettings(concurrency=0)), "Concurrency must be a positive"),
        (Settings(agent=AgentSettings(max_retries=0)), "Max retries must be a positive"),
        (Settings(scan=ScanSettings(rule_file_name=" ")), "RULE_FILE_NAME"),
    ],
)
def test_validate_rejects_unusable_settings(settings: Settings, message: str) -> None:
    with pytest.raises(ValueError, match=message):
        settings.validate()
