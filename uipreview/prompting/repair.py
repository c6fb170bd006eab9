"""Builds auto-repair requests from validator findings."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Sequence

from ..templating import create_env

_LEADING_FENCE = re.compile(r"^```(tsx|typescript|javascript|jsx)?\n")
_TRAILING_FENCE = re.compile(r"\n```$")


@dataclass(frozen=True)
class PromptMessage:
    """Represents a single chat message for LLM prompting."""

    role: str
    content: str


@dataclass
class PromptRequest:
    """Encapsulates a repair request for the generation collaborator."""

    messages: List[PromptMessage]
    metadata: Dict[str, object] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, object]:
        return {
            "messages": [{"role": m.role, "content": m.content} for m in self.messages],
            "metadata": dict(self.metadata),
        }


class RepairPromptBuilder:
    """Turns validator messages and the offending source into a repair prompt.

    Messages are forwarded verbatim, one bullet each, in the order given.
    """

    SYSTEM_PROMPT = "You are a senior React Debugger."
    template_name = "repair_prompt.j2"

    def __init__(
        self,
        templates_dir: Path | None = None,
        *,
        modules: Sequence[str] = ("lucide-react", "recharts"),
    ) -> None:
        self.modules = list(modules)
        self._env = create_env(templates_dir)

    def build(self, code: str, messages: Iterable[str]) -> PromptRequest:
        forwarded = list(messages)
        template = self._env.get_template(self.template_name)
        content = template.render(code=code, messages=forwarded, modules=self.modules)
        return PromptRequest(
            messages=[
                PromptMessage(role="system", content=self.SYSTEM_PROMPT),
                PromptMessage(role="user", content=content),
            ],
            metadata={"issues": len(forwarded)},
        )


def strip_code_fences(text: str) -> str:
    """Remove markdown code fences a model wrapped around generated code."""
    cleaned = _LEADING_FENCE.sub("", text)
    cleaned = _TRAILING_FENCE.sub("", cleaned)
    return cleaned.replace("```", "")


__all__ = ["PromptMessage", "PromptRequest", "RepairPromptBuilder", "strip_code_fences"]
