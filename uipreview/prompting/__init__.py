"""Prompt construction for the external code-repair collaborator."""

from .repair import PromptMessage, PromptRequest, RepairPromptBuilder, strip_code_fences

__all__ = ["PromptMessage", "PromptRequest", "RepairPromptBuilder", "strip_code_fences"]
