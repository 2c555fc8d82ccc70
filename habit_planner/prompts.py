"""Prompt templates for onboarding questions and 7-day plans."""
import json
from typing import Dict

QUESTIONS_SCHEMA = (
    '{"questions":['
    '{"id":"q1","text":"...","type":"single-choice","options":["...","...","..."]},'
    '{"id":"q2","text":"...","type":"text"},'
    '{"id":"q3","text":"...","type":"single-choice","options":["...","...","..."]},'
    '{"id":"q4","text":"...","type":"text"},'
    '{"id":"q5","text":"...","type":"single-choice","options":["1","2","3","4","5"]}'
    ']}'
)

QUESTIONS_TEMPLATE = """You are an expert habit coach.
Your job is to ask concise onboarding questions to personalize a 7-day micro-habit plan.
Return ONLY valid minified JSON that exactly matches the required schema.
Do not include any extra commentary or markdown. Keep each question under 120 characters.
Use only types: "text" or "single-choice".
The questions should be practical and cover barriers, environment, motivation, and confidence.
Avoid asking for highly sensitive information. Use simple language.
Generate at least 4 onboarding questions to personalize a 7-day plan about the habit: "{habit}".
Return JSON ONLY in this exact schema: {schema}
Only respond with the JSON object, nothing else."""


def _day_example(day: int) -> str:
    tags = '["tag1","tag2"]' if day % 2 else '["tag1"]'
    return (
        f'{{"day":{day},"microAction":"...","reflection":"...",'
        f'"verseRefs":["Book Chap:Verse"],"quoteTags":{tags}}}'
    )


PLAN_SCHEMA = '{"planTitle":"...","daily":[' + ",".join(_day_example(d) for d in range(1, 8)) + ']}'

PLAN_TEMPLATE = """You are a Christian habit coach.
Create a 7-day micro-habit plan.
Each day must have exactly: one concrete micro-action that takes under 10 minutes, one brief reflection prompt (one sentence), exactly one Bible verse reference (reference only, no Bible text), and 1-2 quote tags to search for a famous quote.
Return ONLY valid minified JSON that matches the required schema.
Use actionable, specific steps (imperative voice).
Do not include any copyrighted Bible translation text, only references.
Prefer common references that are likely to exist in KJV (e.g., Proverbs, James, Colossians, Joshua, Luke, Philippians).
Keep language simple and encouraging.
Create a personalized 7-day plan for the habit "{habit}" using these answers: {answers}. Rules:
microAction: one specific action doable in <10 minutes (e.g., "Define today's top 3 outcomes.")
reflection: one sentence that invites self-examination (<=140 chars)
verseRefs: exactly one Bible reference string like "Proverbs 21:5" (no text)
quoteTags: 1-2 simple keywords for quotes (e.g., "discipline","focus","courage","stewardship")
Return JSON ONLY in this exact schema: {schema}
Only respond with the JSON object, nothing else."""


def build_questions_prompt(habit: str) -> str:
    """Prompt asking for onboarding questions about ``habit``."""
    return QUESTIONS_TEMPLATE.format(habit=habit, schema=QUESTIONS_SCHEMA)


def build_plan_prompt(habit: str, answers: Dict[str, str]) -> str:
    """Prompt asking for a 7-day plan skeleton, with answers embedded as JSON."""
    answers_json = json.dumps(answers, ensure_ascii=False)
    return PLAN_TEMPLATE.format(habit=habit, answers=answers_json, schema=PLAN_SCHEMA)
