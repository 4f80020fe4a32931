from pathlib import Path

from souverain.enrichment.exceptions import EnrichmentError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_prompt(name: str, path: Path | None = None) -> str:
    """Load a bundled prompt file, or *path* when given.

    Args:
        name: File name inside the bundled prompts directory.
        path: Explicit file to read instead.

    Raises:
        EnrichmentError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / name
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise EnrichmentError(f"Failed to load prompt '{path.name}': {exc}") from exc


def load_system_prompt(path: Path | None = None) -> str:
    return load_prompt("system_prompt.txt", path)


def load_prompt_template(path: Path | None = None) -> str:
    """The user prompt template; ``{form_json}`` and ``{json_schema}`` are filled at call time."""
    return load_prompt("enrichment_prompt.txt", path)


def load_json_schema(path: Path | None = None) -> str:
    return load_prompt("enrichment_schema.json", path)
