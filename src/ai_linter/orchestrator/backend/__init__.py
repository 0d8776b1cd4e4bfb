"""CLI agent adapters and the subprocess runner."""

from ai_linter.orchestrator.backend.base import AgentAdapter, AgentRunRequest, ProcessOutcome
from ai_linter.orchestrator.backend.claude import ClaudeAdapter
from ai_linter.orchestrator.backend.cli_backend import run_agent, spawn_process
from ai_linter.orchestrator.backend.qwen import QwenAdapter

__all__ = [
    "AgentAdapter",
    "AgentRunRequest",
    "ClaudeAdapter",
    "ProcessOutcome",
    "QwenAdapter",
    "run_agent",
    "spawn_process",
]
