"""Agent selection and model resolution."""

from __future__ import annotations

from ai_linter.orchestrator.backend import AgentAdapter, ClaudeAdapter, QwenAdapter

SUPPORTED_AGENTS = ("claude", "qwen")
SUPPORTED_PROFILES = ("fast", "review")

_ADAPTERS: dict[str, AgentAdapter] = {
    "claude": ClaudeAdapter(),
    "qwen": QwenAdapter(),
}


def create_agent(agent: str) -> AgentAdapter:
    """Return the shared adapter registered for an agent tag."""

    normalized = _normalize_agent(agent)
    try:
        return _ADAPTERS[normalized]
    except KeyError as error:
        raise ValueError(
            f"Unsupported agent={agent!r}. Expected one of: {', '.join(SUPPORTED_AGENTS)}",
        ) from error


def resolve_model(
    adapter: AgentAdapter,
    *,
    profile: str,
    model_override: str | None,
) -> str | None:
    """Pick the explicit override, else the adapter default for the profile."""

    if model_override is not None and model_override.strip():
        return model_override.strip()
    if profile == "fast":
        return adapter.default_fast_model
    if profile == "review":
        return adapter.default_review_model
    raise ValueError(
        f"Unsupported profile={profile!r}. Expected one of: {', '.join(SUPPORTED_PROFILES)}",
    )


def _normalize_agent(value: str) -> str:
    return value.strip().lower()
