"""Command-line entry point: render one portfolio from a form JSON file.

Usage:
    python -m souverain.main --form form.json [--template ID] [--output page.html]
"""

import argparse
import json
import sys
import uuid
from pathlib import Path

from souverain.anonymization.exceptions import AnonymizationError
from souverain.config.settings import Settings
from souverain.logging.logger import Log
from souverain.portfolio.exceptions import PortfolioInputError
from souverain.portfolio.form import build_form
from souverain.portfolio.generator import build_generator
from souverain.templating.exceptions import TemplateError


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Generate an HTML portfolio from a form, anonymizing data sent to the AI provider",
    )
    parser.add_argument("--form", required=True, type=Path, help="Form JSON file")
    parser.add_argument("--template", help="Template id (default: from settings)")
    parser.add_argument("--output", type=Path, help="Output HTML file (default: stdout)")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Entry point: load settings -> build generator -> render one form."""
    args = parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level, stream=sys.stderr)

    scope_id = uuid.uuid4().hex[:12]
    try:
        raw = json.loads(args.form.read_text(encoding="utf-8"))
        form = build_form(raw)
        generator = build_generator(settings)
        result = generator.generate(form, template_id=args.template, scope_id=scope_id)
    except (OSError, json.JSONDecodeError) as exc:
        Log.error(f"Cannot read form file: {exc}", scope=scope_id)
        return 1
    except (PortfolioInputError, TemplateError, AnonymizationError, ValueError) as exc:
        Log.error(f"Generation failed: {exc}", scope=scope_id)
        return 1

    if args.output is not None:
        args.output.write_text(result.html, encoding="utf-8")
        Log.info(f"Wrote {args.output}", scope=scope_id, source=result.enrichment_source)
    else:
        sys.stdout.write(result.html)
    return 0


if __name__ == "__main__":
    sys.exit(main())
