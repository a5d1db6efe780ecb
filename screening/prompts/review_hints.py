"""Pre-computed hint block handed to the downstream semantic reviewer.

The screening engine never calls a model itself; the orchestration layer
pastes this text into its reviewer prompt so the reviewer starts from the
rule-based findings instead of rediscovering them.
"""

REVIEW_HINTS_TEMPLATE = """
═══════════════════════════════════════════════════════════════
RULE-BASED PRE-SCREEN RESULTS
═══════════════════════════════════════════════════════════════

{verdict}

ABSOLUTE VIOLATIONS (always a violation, no footnote can fix them)
-----------------------------------------------------------------
{absolute}

MISSING FOOTNOTES (conditional terms used without the required annotation)
-------------------------------------------------------------------------
{conditional}

CONTEXT VIOLATIONS (allowed terms placed in a disallowed framing)
----------------------------------------------------------------
{context}

ACCEPTED ANNOTATIONS (conditional terms whose footnote was found)
----------------------------------------------------------------
{suppressed}

INSTRUCTIONS FOR THE REVIEWER
-----------------------------
- Treat every absolute violation above as confirmed; do not re-argue it.
- For each missing footnote, state which footnote wording would make the copy
  acceptable (the expected wording is listed with the term).
- For context violations, quote the surrounding phrase that triggered them.
- Review the remaining copy for issues the keyword rules cannot see.
""".strip()

NO_FINDINGS = "  (none)"
