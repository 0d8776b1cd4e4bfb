"""Qwen Code CLI adapter."""

from __future__ import annotations

from dataclasses import dataclass

from ai_linter.orchestrator.envelope import Extracted, extract_last_event_result


@dataclass(frozen=True, slots=True)
class QwenAdapter:
    """``qwen <prompt> --output-format json`` printing an array of events.

    The prompt is positional. Without a model override the CLI uses the
    model from its own configuration.
    """

    name: str = "qwen"
    command: str = "qwen"
    default_fast_model: str | None = None
    default_review_model: str | None = None

    def build_args(self, prompt: str, model: str | None = None) -> list[str]:
        args = [prompt, "--output-format", "json"]
        if model:
            args.extend(["--model", model])
        return args

    def extract(self, stdout: str) -> Extracted:
        return extract_last_event_result(stdout)
