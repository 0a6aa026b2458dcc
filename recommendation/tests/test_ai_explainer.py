"""
Prompt building and the optional AI explanation layer.
"""

import json
from types import SimpleNamespace

from recommendation.ai.explainer import AIExplainer, result_fingerprint
from recommendation.ai.prompt_builder import build_system_prompt, build_user_prompt
from recommendation.ai.safety_rules import SAFETY_RULES
from recommendation.logic import StudentProfile


class FakeCompletions:
    def __init__(self, content):
        self.content = content
        self.calls = 0

    def create(self, **kwargs):
        self.calls += 1
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def _fake_client(content):
    completions = FakeCompletions(content)
    return SimpleNamespace(chat=SimpleNamespace(completions=completions)), completions


def _engine_output(engine, answers, generated_at):
    return engine.recommend(StudentProfile(**answers), generated_at=generated_at).to_response()


def test_system_prompt_carries_every_safety_rule():
    prompt = build_system_prompt()
    for rule in SAFETY_RULES:
        assert rule in prompt
    assert "career_explanations" in prompt


def test_user_prompt_summarizes_engine_output(engine, helping_answers):
    output = _engine_output(engine, helping_answers, "2026-01-15T12:00:00+00:00")
    prompt = build_user_prompt(helping_answers, output)

    assert "Healthcare & Life Sciences" in prompt
    assert output["career_recommendations"]["best_fit"][0]["career"]["name"] in prompt
    # ZIP code is never sent to the provider
    assert helping_answers["zipCode"] not in prompt


def test_no_api_key_skips_explanation(engine, helping_answers):
    explainer = AIExplainer()
    output = _engine_output(engine, helping_answers, "2026-01-15T12:00:00+00:00")
    assert explainer.client is None
    assert explainer.get_explanation(helping_answers, output) is None


def test_explanations_are_cached_per_result(engine, helping_answers):
    client, completions = _fake_client(json.dumps({"summary_explanation": "Healthcare looks promising."}))
    explainer = AIExplainer(client=client)

    first = _engine_output(engine, helping_answers, "2026-01-15T12:00:00+00:00")
    later = _engine_output(engine, helping_answers, "2026-02-01T08:00:00+00:00")

    assert explainer.get_explanation(helping_answers, first) == {"summary_explanation": "Healthcare looks promising."}
    assert explainer.get_explanation(helping_answers, later)["summary_explanation"]
    assert completions.calls == 1
    assert result_fingerprint(first) == result_fingerprint(later)


def test_invalid_json_from_provider_is_dropped(engine, helping_answers):
    client, _ = _fake_client("not json at all")
    explainer = AIExplainer(client=client)
    output = _engine_output(engine, helping_answers, "2026-01-15T12:00:00+00:00")
    assert explainer.get_explanation(helping_answers, output) is None


def test_cache_keeps_only_recent_results(engine, helping_answers, make_answers):
    client, completions = _fake_client(json.dumps({"summary_explanation": "ok"}))
    explainer = AIExplainer(client=client, max_cache_entries=1)

    tech_answers = make_answers(workStyle=["technology"], traits=["analytical"])
    helping = _engine_output(engine, helping_answers, "2026-01-15T12:00:00+00:00")
    tech = _engine_output(engine, tech_answers, "2026-01-15T12:00:00+00:00")

    explainer.get_explanation(helping_answers, helping)
    explainer.get_explanation(tech_answers, tech)
    assert len(explainer.cache) == 1
    assert list(explainer.cache) == [result_fingerprint(tech)]

    # The evicted result goes back to the provider
    explainer.get_explanation(helping_answers, helping)
    assert completions.calls == 3
