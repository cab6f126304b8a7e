from __future__ import annotations

from research_report.models import FileData, ResearchUpdate
from research_report.prompts import (
    NO_EVIDENCE_PLACEHOLDER,
    build_rewrite_prompt,
    build_synthesis_prompt,
)
from research_report.synthesis import assemble_synthesis_prompt


def test_synthesis_prompt_places_query_and_evidence_between_markers() -> None:
    prompt = assemble_synthesis_prompt(
        "Summarize market growth",
        [ResearchUpdate(type="read", content="Market grew 12%")],
    )
    assert "<REQUIREMENT>Summarize market growth</REQUIREMENT>" in prompt
    assert "<LEARNINGS>Market grew 12%</LEARNINGS>" in prompt
    assert "<HISTORY>read: Market grew 12%</HISTORY>" in prompt
    assert "No file was provided." in prompt


def test_placeholder_replaces_empty_evidence() -> None:
    prompt = build_synthesis_prompt("q", "", "search: q")
    assert f"<LEARNINGS>{NO_EVIDENCE_PLACEHOLDER}</LEARNINGS>" in prompt
    assert "<LEARNINGS></LEARNINGS>" not in prompt


def test_synthesis_prompt_carries_structural_contract() -> None:
    prompt = build_synthesis_prompt("q", "evidence", "read: evidence")
    sections = [
        "Executive Summary",
        "Detailed Analysis of Findings",
        "Strategic Implications & Future Outlook",
        "Conclusion",
    ]
    positions = [prompt.index(s) for s in sections]
    assert positions == sorted(positions)
    assert "`graph TD`" in prompt and "`graph LR`" in prompt
    assert "MUST be wrapped in double quotes" in prompt
    assert "Do NOT include inline citations" in prompt
    assert "starting with the first H1 heading" in prompt
    assert "no length limit" in prompt.lower()


def test_synthesis_prompt_names_attached_file() -> None:
    file = FileData(name="q3.pdf", mime_type="application/pdf", data="QUJD")
    prompt = build_synthesis_prompt("q", "e", "n", file)
    assert "A file named 'q3.pdf' was provided" in prompt
    assert "QUJD" not in prompt


def test_synthesis_prompt_is_deterministic() -> None:
    history = [
        ResearchUpdate(type="search", content=["a", "b"], persona="Scout"),
        ResearchUpdate(type="read", content="body"),
    ]
    assert assemble_synthesis_prompt("q", history) == assemble_synthesis_prompt("q", history)


def test_rewrite_prompt_keeps_report_verbatim() -> None:
    report = "# Title\n\n- item {with braces}\n\n```mermaid\ngraph TD\n```"
    prompt = build_rewrite_prompt(report, "no changes")
    assert f"<REPORT>\n{report}\n</REPORT>" in prompt
    assert "<INSTRUCTION>\nno changes\n</INSTRUCTION>" in prompt
    assert "No file was attached." in prompt


def test_rewrite_prompt_has_no_section_contract() -> None:
    prompt = build_rewrite_prompt("r", "shorter")
    assert "Executive Summary" not in prompt
    assert "Preserve the original meaning and data" in prompt


def test_rewrite_prompt_mentions_file() -> None:
    file = FileData(name="notes.txt", mime_type="text/plain", data="aGk=")
    prompt = build_rewrite_prompt("r", "use the notes", file)
    assert "<FILE_CONTEXT>\nA file named 'notes.txt' was attached.\n</FILE_CONTEXT>" in prompt
