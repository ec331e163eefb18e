"""Tests for the assessment scoring engine."""

import pytest

from models.schemas.assessment import AssessmentResult, AssessmentScores
from services.classification import DIMENSIONS
from services.engines.assessment import (
    DEFAULT_PATHS,
    generate_insights,
    get_dimension_description,
    get_dimension_label,
    get_score_interpretation,
    process_assessment,
    score_assessment,
    unanswered_dimensions,
)
from services.question_bank import ASSESSMENT_QUESTIONS_V1, ASSESSMENT_VERSION, QUESTIONS_BY_ID


def _scores(service, clienteling, operations, leadership):
    return AssessmentScores(
        service_excellence=service,
        clienteling=clienteling,
        operations=operations,
        leadership_signals=leadership,
    )


class TestQuestionBank:
    def test_twelve_questions_three_per_dimension(self):
        assert len(ASSESSMENT_QUESTIONS_V1) == 12
        for dim in DIMENSIONS:
            assert sum(1 for q in ASSESSMENT_QUESTIONS_V1 if q.dimension == dim) == 3

    def test_option_scores_in_unit_range(self):
        for question in ASSESSMENT_QUESTIONS_V1:
            assert 3 <= len(question.options) <= 5
            assert all(0.0 <= o.score <= 1.0 for o in question.options)
            assert max(o.score for o in question.options) == 1.0

    def test_ids_unique(self):
        assert len(QUESTIONS_BY_ID) == len(ASSESSMENT_QUESTIONS_V1)


class TestScoreAssessment:
    def test_all_maximum_answers(self, max_answers):
        scores = score_assessment(max_answers)
        assert scores == _scores(100, 100, 100, 100)

    def test_weighted_dimension_score(self, max_answers):
        # (1.0*1.0 + 0.5*0.8 + 0.3*1.2) / 3.0 = 0.5867
        answers = {**max_answers, "se-1": "a", "se-2": "3", "se-3": "a"}
        assert score_assessment(answers).service_excellence == 59

    def test_unanswered_question_skipped(self, max_answers):
        answers = {**max_answers, "se-3": "c"}
        del answers["se-2"]
        # only se-1 (1.0 * 1.0) and se-3 (0.0 * 1.2) count
        assert score_assessment(answers).service_excellence == 45

    def test_unknown_option_ignored(self, max_answers):
        answers = {**max_answers, "op-1": "z"}
        assert score_assessment(answers).operations == 100

    def test_unanswered_dimension_scores_zero(self):
        answers = {"se-1": "a", "se-2": "5", "se-3": "b"}
        scores = score_assessment(answers)
        assert scores.service_excellence == 100
        assert scores.clienteling == 0
        assert unanswered_dimensions(answers) == [
            "clienteling", "operations", "leadership_signals",
        ]


class TestGenerateInsights:
    def test_strengths_and_development_areas(self):
        insights = generate_insights(_scores(90, 80, 60, 50))
        assert insights.strengths == ["Service Excellence", "Clienteling"]
        assert insights.development_areas == ["Operations", "Leadership"]
        assert insights.overall_score == 70

    @pytest.mark.parametrize("values", [
        (10, 20, 30, 40),
        (95, 12, 77, 43),
        (1, 100, 50, 99),
    ])
    def test_buckets_partition_dimensions(self, values):
        insights = generate_insights(_scores(*values))
        both = insights.strengths + insights.development_areas
        assert len(both) == 4
        assert len(set(both)) == 4

    def test_ties_keep_dimension_order(self):
        insights = generate_insights(_scores(70, 70, 70, 70))
        assert insights.strengths == ["Service Excellence", "Clienteling"]
        assert insights.development_areas == ["Operations", "Leadership"]

    def test_overall_rounds_half_up(self):
        assert generate_insights(_scores(71, 71, 70, 70)).overall_score == 71

    def test_client_facing_and_specialist_paths(self):
        insights = generate_insights(_scores(90, 80, 60, 50))
        assert insights.recommended_paths == [
            "Client Relationship Specialist",
            "VIC Manager",
            "Personal Stylist",
            "Product Specialist",
            "Brand Ambassador",
        ]

    def test_balanced_profile_paths(self):
        insights = generate_insights(_scores(70, 70, 70, 70))
        assert insights.recommended_paths == [
            "Team Lead",
            "Floor Manager",
            "Assistant Store Manager",
            "Store Director Track",
            "Multi-Brand Specialist",
        ]

    def test_operational_paths(self):
        insights = generate_insights(_scores(40, 40, 80, 40))
        assert insights.recommended_paths == [
            "Operations Coordinator", "Stock Manager", "Visual Merchandiser",
        ]

    def test_paths_truncated_to_five(self):
        insights = generate_insights(_scores(100, 100, 100, 100))
        assert len(insights.recommended_paths) == 5

    def test_fallback_paths(self):
        insights = generate_insights(_scores(50, 50, 50, 50))
        assert insights.recommended_paths == DEFAULT_PATHS


class TestProcessAssessment:
    def test_full_result(self, max_answers):
        result = process_assessment(max_answers)
        assert isinstance(result, AssessmentResult)
        assert result.version == ASSESSMENT_VERSION == "v1"
        assert result.insights.overall_score == 100
        assert result.unanswered_dimensions == []

    def test_minimum_answers_use_default_paths(self):
        answers = {
            "se-1": "d", "se-2": "1", "se-3": "c",
            "cl-1": "a", "cl-2": "c", "cl-3": "c",
            "op-1": "d", "op-2": "c", "op-3": "1",
            "ls-1": "d", "ls-2": "c", "ls-3": "1",
        }
        result = process_assessment(answers)
        assert result.scores.service_excellence == 0
        assert result.scores.clienteling == 16
        assert result.insights.recommended_paths == DEFAULT_PATHS

    def test_does_not_mutate_answers(self, max_answers):
        snapshot = dict(max_answers)
        process_assessment(max_answers)
        assert max_answers == snapshot

    def test_partial_submission_reported(self):
        result = process_assessment({"cl-1": "c"})
        assert result.scores.clienteling == 100
        assert result.unanswered_dimensions == [
            "service_excellence", "operations", "leadership_signals",
        ]


class TestLabels:
    def test_dimension_labels(self):
        assert get_dimension_label("leadership_signals") == "Leadership Signals"
        assert "client relationships" in get_dimension_description("clienteling")

    @pytest.mark.parametrize("score,level", [
        (85, "excellent"),
        (84, "strong"),
        (70, "strong"),
        (55, "developing"),
        (54, "emerging"),
    ])
    def test_score_interpretation(self, score, level):
        assert get_score_interpretation(score).level == level
