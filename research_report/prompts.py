"""Prompt templates for report synthesis and rewriting.

Templates are plain ``str.format`` strings with named slots. Bump
``PROMPT_VERSION`` whenever the wording of a contract changes.
"""

from typing import Optional

from .models import FileData

PROMPT_VERSION = "2"

NO_EVIDENCE_PLACEHOLDER = (
    "No specific content was read during research. Base the report primarily "
    "on the research history and any attached file."
)

# ──────────────────────────────────────────────────────────────────────
# SYNTHESIS
# ──────────────────────────────────────────────────────────────────────

SYNTHESIS_TEMPLATE = """You are an elite Senior Research Analyst and Strategist. Your mission is to produce a comprehensive, insightful, and substantial research report. Your analysis must be sharp, detailed, and decision-ready. There is no length limit; be as thorough as the data allows.

**Your Task:**
Turn the raw research materials below (synthesized learnings, the full research history, and any attached file) into a polished and extensive final report.

**Core User Requirement:**
<REQUIREMENT>{query}</REQUIREMENT>

**Evidence Base (Your Sole Source of Truth):**
*   **Attached File:** {file_note}
*   **Synthesized Research Learnings:** <LEARNINGS>{learnings}</LEARNINGS>
*   **Full Research History (For Context and Nuance):** <HISTORY>{history}</HISTORY>

**--- MANDATORY REPORTING INSTRUCTIONS ---**

You must generate a report that strictly adheres to the following guidelines.

**1. Content and Structure:**
*   **# 1. Executive Summary:**
    *   Open with a dense, high-level overview of the most critical findings and conclusions, written for a C-suite audience.
*   **# 2. Detailed Analysis of Findings:**
    *   This is the core of the report and must be extensive and deeply analytical.
    *   Synthesize everything in the `<LEARNINGS>` block and the attached file into a coherent, thematic analysis.
    *   Organize the findings into logical themes of your choosing using `##` for major thematic headings (e.g. "## Market Trends", "## Competitive Landscape") and `###` for sub-topics within a theme.
    *   Interpret the facts, connect disparate points and discuss their implications instead of merely listing them.
*   **# 3. Strategic Implications & Future Outlook:**
    *   Based *exclusively* on the Detailed Analysis, deduce the strategic implications for the target audience.
    *   Give clear, actionable recommendations justified by the research findings.
    *   Discuss the likely future trajectory of the topic and name open questions or areas for further research.
*   **# 4. Conclusion:**
    *   Close with a strong, concise summary of the most important takeaways and their significance.

**2. Critical Stylistic and Formatting Requirements:**
*   **Evidence-Based Assertions:** Every key assertion, claim or data point MUST be traceable to the provided research data. Phrase references to the research naturally so the report reads like a human-written document, not a log file.
    *   **GOOD:** "The research uncovered that the primary competitor uses a different manufacturing process..."
    *   **GOOD:** "Analysis of the search results shows a growing trend towards..."
    *   **BAD:** "Based on the summary for 'competitor manufacturing process'..."
*   **Data Visualization with Mermaid.js:** When the research describes systems, relationships or processes worth visualizing, you MUST include one or more Mermaid.js graphs. Follow these strict rules:
    *   1. Use `graph TD` (top-down) or `graph LR` (left-right).
    *   2. Give every entity a unique, simple English node ID (e.g. `personA`, `orgB`). The node text must show the full name or description of the entity.
    *   3. All text content (node text, edge labels) **MUST be wrapped in double quotes**. Example: `personA["Alice Smith"] --> |"is CEO of"| orgB["XYZ Company"]`.
    *   4. Keep graphs concise and focused on the most important entities and relationships.
    *   5. Double-check the syntax so the Mermaid code is valid.
    *   6. Embed the complete ```mermaid ... ``` code block directly in the relevant section of the report.
*   **Tone & Formatting:** Keep a formal, objective and authoritative tone. Use Markdown extensively (headings, lists, bold text).
*   **Exclusivity:** Base the report **exclusively** on the information provided here. Do NOT invent information or use outside knowledge. Do NOT include inline citations; a separate citation list is provided elsewhere.

**Final Output:**
Respond ONLY with the raw Markdown content of the final report, starting with the first H1 heading. Do not add any conversational text or explanation.
"""

# ──────────────────────────────────────────────────────────────────────
# REWRITE
# ──────────────────────────────────────────────────────────────────────

REWRITE_TEMPLATE = """You are an expert copy editor. Your task is to rewrite the provided Markdown report according to a specific instruction.
You must adhere to these rules:
1.  The output MUST be only the raw Markdown of the rewritten report. Do not add any conversational text, introductions, or explanations.
2.  Preserve the original meaning and data of the report unless the instruction explicitly asks to change it.
3.  Keep the original Markdown formatting (headings, lists, etc.) as much as the instruction allows.

**Original Report:**
<REPORT>
{report}
</REPORT>

**Instruction:**
<INSTRUCTION>
{instruction}
</INSTRUCTION>

**Attached File (if any, provides additional context for the instruction):**
<FILE_CONTEXT>
{file_note}
</FILE_CONTEXT>

Respond with the rewritten report now."""


def build_synthesis_prompt(
    query: str,
    evidence: str,
    narrative: str,
    file: Optional[FileData] = None,
) -> str:
    if file is not None:
        file_note = f"A file named '{file.name}' was provided and its content is a primary source."
    else:
        file_note = "No file was provided."
    return SYNTHESIS_TEMPLATE.format(
        query=query,
        file_note=file_note,
        learnings=evidence or NO_EVIDENCE_PLACEHOLDER,
        history=narrative,
    )


def build_rewrite_prompt(
    report: str,
    instruction: str,
    file: Optional[FileData] = None,
) -> str:
    file_note = f"A file named '{file.name}' was attached." if file is not None else "No file was attached."
    return REWRITE_TEMPLATE.format(
        report=report,
        instruction=instruction,
        file_note=file_note,
    )
