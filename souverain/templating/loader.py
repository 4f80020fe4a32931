import re
from pathlib import Path

from souverain.templating.exceptions import TemplateLoadError

_DEFAULT_TEMPLATES_DIR = Path(__file__).parent / "templates"
_TEMPLATE_ID_RE = re.compile(r"[A-Za-z0-9][A-Za-z0-9_\-]*")


class TemplateLoader:
    """Reads HTML skeletons from a directory, one ``<id>.html`` file each."""

    def __init__(self, templates_dir: Path | None = None) -> None:
        self._templates_dir = templates_dir if templates_dir is not None else _DEFAULT_TEMPLATES_DIR

    def load(self, template_id: str) -> str:
        """Return the raw template markup.

        Raises:
            TemplateLoadError: if the id is invalid or the file is missing,
                unreadable or empty. There is no fallback render.
        """
        if not _TEMPLATE_ID_RE.fullmatch(template_id):
            raise TemplateLoadError(f"Invalid template id: {template_id!r}")
        path = self._templates_dir / f"{template_id}.html"
        try:
            markup = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise TemplateLoadError(f"Failed to load template '{template_id}': {exc}") from exc
        if not markup.strip():
            raise TemplateLoadError(f"Template '{template_id}' is empty")
        return markup
