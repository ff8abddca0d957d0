"""seoquote Quickstart — price an international SEO project in a few lines."""

import asyncio

from seoquote import QuoteSession, SeoquoteConfig
from seoquote.proposal import GeminiGenerator, ProposalRequester

# 1. Read GEMINI_API_KEY / SEOQUOTE_* from the environment and start from the
#    default configuration (2 languages, medium everything)
config = SeoquoteConfig.from_env()
s = QuoteSession(config)

# 2. Describe the project
s.update(language_count=5, site_type="ecommerce", technical_debt="high")
s.add_addon("extra_articles")
s.add_addon("extra_tech_sprints")

# 3. Read the recommendation
q = s.quote()
print(f"Plan: {q.tier.name} ({q.tier.target_description})")
print(f"Setup: {q.price.setup_cost}€   Monthly: {q.price.monthly_cost}€")
if q.extra_language_notice:
    print(q.extra_language_notice)
for bar in q.breakdown:
    print(f"  {bar.name:<14} {bar.value:>6}€")

# 4. Ask for an executive summary (uses the GEMINI_API_KEY read above)
requester = ProposalRequester(GeminiGenerator(config), config)
state = asyncio.run(requester.request(q))
print(f"\n--- Proposal ({state.status.value}) ---")
print(state.text)
