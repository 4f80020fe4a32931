from souverain.anonymization.base import BaseAnonymizer
from souverain.anonymization.deanonymizer import Deanonymizer
from souverain.anonymization.factory import AnonymizerFactory
from souverain.anonymization.models import ObjectAnonymizationResult
from souverain.config.settings import Settings
from souverain.enrichment.base import BaseEnricher
from souverain.enrichment.exceptions import EnrichmentError
from souverain.enrichment.factory import EnricherFactory
from souverain.enrichment.models import EnrichedContent
from souverain.enrichment.validator import validate_and_build
from souverain.logging.logger import Log
from souverain.portfolio.assembly import assemble
from souverain.portfolio.fallback import fallback_content
from souverain.portfolio.flags import compute_flags
from souverain.portfolio.form import enrichment_payload
from souverain.portfolio.models import GenerationResult, PortfolioForm
from souverain.portfolio.template_data import to_template_data
from souverain.templating.injector import TemplateInjector
from souverain.templating.loader import TemplateLoader


class PortfolioGenerator:
    """Orchestrates one portfolio generation.

    Pipeline: load template -> anonymize -> enrich (or fall back) ->
    restore -> re-inject form fields -> render.
    """

    def __init__(
        self,
        *,
        anonymizer: BaseAnonymizer,
        deanonymizer: Deanonymizer,
        enricher: BaseEnricher,
        template_loader: TemplateLoader,
        injector: TemplateInjector,
        default_template_id: str = "default",
    ) -> None:
        self._anonymizer = anonymizer
        self._deanonymizer = deanonymizer
        self._enricher = enricher
        self._template_loader = template_loader
        self._injector = injector
        self._default_template_id = default_template_id

    def generate(
        self,
        form: PortfolioForm,
        template_id: str | None = None,
        scope_id: str | None = None,
    ) -> GenerationResult:
        """Generate the HTML portfolio for *form*.

        Raises:
            TemplateLoadError: if the template cannot be loaded.
            AnonymizationError: if the form cannot be anonymized.
        """
        template_id = template_id or self._default_template_id
        Log.info(f"Generating portfolio with template '{template_id}'", scope=scope_id)

        # Step 1: Load template; nothing else runs without it
        template = self._template_loader.load(template_id)

        # Step 2: Anonymize what the copywriter will see
        anonymized = self._anonymizer.anonymize_object(enrichment_payload(form), scope_id=scope_id)

        # Step 3: Enrich once, or fall back
        content, error = self._enrich(anonymized, scope_id)
        source = "ai"
        if content is None:
            content = fallback_content(form)
            source = "fallback"

        # Step 4: Re-inject form fields, then render
        portfolio = assemble(content, form)
        html = self._injector.render(
            template,
            to_template_data(portfolio),
            compute_flags(portfolio),
        )
        Log.info(
            f"Portfolio generated: {len(html)} chars",
            scope=scope_id,
            source=source,
            entities=len(anonymized.mapping),
        )
        return GenerationResult(
            html=html,
            enrichment_source=source,
            anonymized_entities=len(anonymized.mapping),
            stats_by_category=dict(anonymized.stats_by_category),
            error=error,
        )

    def _enrich(
        self,
        anonymized: ObjectAnonymizationResult,
        scope_id: str | None,
    ) -> tuple[EnrichedContent | None, str | None]:
        try:
            enriched = self._enricher.enrich(anonymized.anonymized_object)
            restored = self._deanonymizer.restore_object(enriched, anonymized.mapping)
            return validate_and_build(restored), None
        except EnrichmentError as exc:
            Log.warning(f"Enrichment failed, using fallback: {exc}", scope=scope_id)
            return None, str(exc)


def build_generator(settings: Settings) -> PortfolioGenerator:
    """Build a PortfolioGenerator with all required adapters."""
    return PortfolioGenerator(
        anonymizer=AnonymizerFactory.create(settings),
        deanonymizer=Deanonymizer(),
        enricher=EnricherFactory.create(settings),
        template_loader=TemplateLoader(settings.templates_dir),
        injector=TemplateInjector(),
        default_template_id=settings.default_template_id,
    )
