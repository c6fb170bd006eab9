"""Renders the assembled program into a standalone preview document."""

from __future__ import annotations

from pathlib import Path

from ..config import RuntimeConfig, ThemeConfig
from ..templating import create_env

# Hooks bound in the scope enclosing user code; user declarations may shadow them.
AMBIENT_HOOKS: tuple[str, ...] = (
    "useState",
    "useEffect",
    "useRef",
    "useCallback",
    "useMemo",
    "useReducer",
    "useContext",
    "useLayoutEffect",
)
MOUNT_NODE_ID = "root"


class DocumentRenderer:
    """Wraps a preview program in the page template."""

    template_name = "preview.html.j2"

    def __init__(
        self,
        runtime: RuntimeConfig | None = None,
        theme: ThemeConfig | None = None,
        *,
        templates_dir: Path | None = None,
    ) -> None:
        self.runtime = runtime or RuntimeConfig()
        self.theme = theme or ThemeConfig()
        self._env = create_env(templates_dir, autoescape=True)

    def render(self, script: str) -> str:
        template = self._env.get_template(self.template_name)
        return template.render(
            script=script,
            runtime=self.runtime,
            theme=self.theme,
            font_query=self.theme.font_family.replace(" ", "+"),
            hooks=", ".join(AMBIENT_HOOKS),
            mount_id=MOUNT_NODE_ID,
        )


__all__ = ["AMBIENT_HOOKS", "DocumentRenderer", "MOUNT_NODE_ID"]
