from roadmap_pipeline.prompt_builder import (
    DOCUMENT_END,
    DOCUMENT_START,
    build_prompt,
    truncate_document,
)
from schemas.generation import GenerationRequest


def _document_section(prompt: str) -> str:
    start = prompt.index(DOCUMENT_START) + len(DOCUMENT_START) + 1
    end = prompt.index(DOCUMENT_END) - 1
    return prompt[start:end]


def test_build_prompt_is_deterministic(resume_text):
    request = GenerationRequest(document_text=resume_text, user_goals="Lead a team", desired_direction="Cloud")
    assert build_prompt(request) == build_prompt(request)
    assert build_prompt(request) == build_prompt(GenerationRequest(**request.model_dump()))


def test_long_document_is_cut_exactly_at_budget():
    text = "abcdefghij" * 100
    prompt = build_prompt(GenerationRequest(document_text=text), max_document_chars=257)
    section = _document_section(prompt)
    assert len(section) == 257
    assert section == text[:257]


def test_short_document_is_embedded_unchanged(resume_text):
    prompt = build_prompt(GenerationRequest(document_text=resume_text))
    assert _document_section(prompt) == resume_text


def test_truncation_is_not_sentence_aware():
    assert truncate_document("First sentence. Second sentence.", 20) == "First sentence. Seco"


def test_hint_sections_omitted_when_absent(resume_text):
    prompt = build_prompt(GenerationRequest(document_text=resume_text))
    assert "Candidate's stated goals" not in prompt
    assert "Desired career direction" not in prompt


def test_blank_hints_do_not_create_empty_sections(resume_text):
    prompt = build_prompt(GenerationRequest(document_text=resume_text, user_goals="   ", desired_direction=""))
    assert "Candidate's stated goals" not in prompt
    assert "Desired career direction" not in prompt
    assert prompt.endswith(DOCUMENT_END)


def test_hints_appended_after_document(resume_text):
    prompt = build_prompt(
        GenerationRequest(document_text=resume_text, user_goals=" Become a tech lead ", desired_direction="Cloud engineering")
    )
    doc_end = prompt.index(DOCUMENT_END)
    goals_at = prompt.index("Candidate's stated goals:\nBecome a tech lead")
    direction_at = prompt.index("Desired career direction:\nCloud engineering")
    assert doc_end < goals_at < direction_at


def test_only_direction_given(resume_text):
    prompt = build_prompt(GenerationRequest(document_text=resume_text, desired_direction="Data science"))
    assert "Candidate's stated goals" not in prompt
    assert prompt.endswith("Desired career direction:\nData science")


def test_instructions_describe_schema(resume_text):
    prompt = build_prompt(GenerationRequest(document_text=resume_text))
    assert "career counselor" in prompt
    assert "single JSON object" in prompt
    for key in (
        "profileSummary",
        "currentSkills",
        "strengths",
        "areasForImprovement",
        "careerPaths",
        "skillsToDevelop",
        "potentialSalary",
        "difficulty",
        "immediateActionItems",
        "positiveFeedback",
    ):
        assert f'"{key}"' in prompt
    assert "Beginner | Intermediate | Advanced" in prompt
