"""Prompt templates for the executive-summary proposal."""

from __future__ import annotations

from seoquote.core.types import AddonKind, Quote

_EN = """\
Act as a Senior International SEO Consultant.
Write a persuasive executive summary for a commercial SEO proposal under the "Partner" pricing model.
Project details:
- Total languages: {languages} (includes {extra} additional languages)
- Site type: {site_type}
- Complexity: {complexity}
- Recommended plan: {plan}
- Extras: {articles} extra articles, {landings} extra landings, {sprints} technical sprints.
- Setup Cost: {setup}{currency}
- Monthly Fee: {monthly}{currency}

The tone must be professional, strategic and results-oriented.
Write in English. Structure the text as:
1. Strategic Challenge.
2. Our Solution (explain why the {plan} plan is the right fit).
3. Value of the selected add-ons.
4. Estimated investment and next steps.
Use Markdown for formatting. Maximum {max_words} words.
"""

_ES = """\
Actúa como Consultor Senior de SEO Internacional.
Redacta un resumen ejecutivo persuasivo para una propuesta comercial de SEO bajo el modelo de precios "Partner".
Detalles del proyecto:
- Idiomas totales: {languages} (incluye {extra} idiomas adicionales)
- Tipo de sitio: {site_type}
- Complejidad: {complexity}
- Plan recomendado: {plan}
- Extras: {articles} artículos extra, {landings} landings extra, {sprints} sprints técnicos.
- Coste de Setup: {setup}{currency}
- Fee mensual: {monthly}{currency}

El tono debe ser profesional, estratégico y orientado a resultados.
Escribe en español. Estructura el texto en:
1. Reto estratégico.
2. Nuestra solución (explica por qué el plan {plan} es el adecuado).
3. Valor de los add-ons seleccionados.
4. Inversión estimada y próximos pasos.
Usa Markdown para el formato. Máximo {max_words} palabras.
"""

TEMPLATES = {"en": _EN, "es": _ES}

EMPTY_TEXT = {
    "en": "Could not generate text.",
    "es": "No se pudo generar el texto.",
}

FAILURE_TEXT = {
    "en": "Error connecting to AI. Please check your connection.",
    "es": "Error al conectar con la IA. Revisa tu conexión.",
}


def build_prompt(
    quote: Quote,
    *,
    language: str = "en",
    max_words: int = 300,
    currency: str = "€",
) -> str:
    """Render the proposal prompt for *quote*."""
    template = TEMPLATES.get(language, _EN)
    cfg = quote.config
    return template.format(
        languages=cfg.language_count,
        extra=quote.price.extra_language_count,
        site_type=cfg.site_type.label,
        complexity=cfg.complexity.label,
        plan=quote.tier.name,
        articles=quote.addons.get(AddonKind.EXTRA_ARTICLES),
        landings=quote.addons.get(AddonKind.EXTRA_LANDINGS),
        sprints=quote.addons.get(AddonKind.EXTRA_TECH_SPRINTS),
        setup=quote.price.setup_cost,
        monthly=quote.price.monthly_cost,
        currency=currency,
        max_words=max_words,
    )
