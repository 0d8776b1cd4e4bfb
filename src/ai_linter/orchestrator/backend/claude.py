"""Claude Code CLI adapter."""

from __future__ import annotations

from dataclasses import dataclass

from ai_linter.orchestrator.envelope import Extracted, extract_object_result


@dataclass(frozen=True, slots=True)
class ClaudeAdapter:
    """``claude -p <prompt> --output-format json`` printing one JSON object."""

    name: str = "claude"
    command: str = "claude"
    default_fast_model: str | None = "haiku"
    default_review_model: str | None = "sonnet"

    def build_args(self, prompt: str, model: str | None = None) -> list[str]:
        args = ["-p", prompt, "--output-format", "json"]
        if model:
            args.extend(["--model", model])
        return args

    def extract(self, stdout: str) -> Extracted:
        return extract_object_result(stdout)
