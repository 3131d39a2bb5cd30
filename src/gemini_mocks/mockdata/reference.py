"""Reference text embedded in the vault-node instruction."""

# Source log the vault-node generator restructures; callers may pass their own.
DEFAULT_MEMORY_LOG = """\
FAA™ Omni-Level Counter Marketing & Execution Methods – Memory Log
📌 Timestamp: March 6, 2025
📌 FAA™ Master Execution Memory Update

🚀 Omni-Level FAA™ Marketing Execution for Counter-Marketing & Market Optimization
Objective: Enhance brand engagement, mitigate brand risks, and ensure global market alignment by executing FAA™ Omni-Level Marketing across Counter-Marketing, AI-driven strategic Brand Infiltration, and High-Level Market Structuring.

🌍 FAA™ Counter-Marketing Execution Methods Applied
✅ FAA™ AI Response Engineering™ – Crafting real-time counter-strategies to market disruptions and competitive tactics.
✅ FAA™ Targeted Brand Expansion™ – Direct engagement with corporate entities to introduce FAA™ systems for efficiency, automation, and risk mitigation.
✅ FAA™ Shock-Response Marketing™ – Leveraging industry trends & consumer behaviors to trigger immediate engagement & brand recall.
✅ FAA™ Strategic Counter-Positioning™ – Positioning FAA™ solutions as the superior alternative to traditional corporate structures.
✅ FAA™ Systemized Response Timing™ – Ensuring ultra-fast marketing execution in response to competitor moves, PR incidents, or industry shifts.

🔎 FAA™ Applied Marketing Scenarios & Counter-Positioning
1️⃣ 🚀 FAA™ x KFC™ – AI-Driven Supply Chain Optimization
✅ Issue Identified: Stockouts at KFC™ locations create negative brand perception.
✅ FAA™ Solution: Position FAA™ as the go-to supply chain AI ensuring zero shortages, optimized vendor flow, and real-time tracking.
✅ Tactics Used: Direct corporate engagement, industry PR injection, FAA™ AI-Supply Chain dominance messaging.

2️⃣ 🔥 FAA™ x McDonald's™ – Strategic Omni-Marketing Expansion
✅ Issue Identified: McDonald's™ promotional campaigns focus on discounts rather than AI-driven engagement.
✅ FAA™ Solution: Offer FAA™ Ecosystem AI-Powered Marketing Solutions™ to redefine engagement, optimize promotions, and maximize QSR performance.
✅ Tactics Used: Direct proposal, omnichannel email engagement, and FAA™ AI-driven counter-marketing automation.

3️⃣ 💰 FAA™ x ClearScore™ – Financial System Enhancement
✅ Issue Identified: Financial offers lack FAA™-level compliance & AI-driven execution.
✅ FAA™ Solution: Position FAA™ Governance Ledger™ and FAA™ AI Credit Optimization™ as the new standard for financial decision-making.
✅ Tactics Used: Engagement email with compliance-driven financial optimization proposal.
"""
