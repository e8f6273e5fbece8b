# tests/test_property_based.py
"""
Property-Based Tests — ScoringEngine

Hypothesis tests covering:
  - zero-initialized, exactly-configured score maps
  - percentage bounds for single-answer 1-5 rating sessions
  - determinism and order independence of raw totals
  - no exceptions on arbitrary bank / response data
"""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from assessment_scoring.models.assessment import Question, ResponseRecord, ScoringConfig
from assessment_scoring.models.enumerations import Normalization, ScoringMethod
from assessment_scoring.scoring.scoring_engine import ScoringEngine

# ---------------------------------------------------------------------------
# Shared strategies
# ---------------------------------------------------------------------------

CATEGORY_POOL = [
    "linguistic", "spatial", "musical", "dominance",
    "influence", "visual", "auditory", "kinesthetic",
]

category_st = st.sampled_from(CATEGORY_POOL)
categories_st = st.lists(category_st, min_size=1, max_size=6, unique=True)
method_st = st.sampled_from(list(ScoringMethod))
normalization_st = st.sampled_from(list(Normalization))

value_st = st.one_of(
    st.booleans(),
    st.integers(min_value=-10, max_value=10),
    st.floats(min_value=-10, max_value=10, allow_nan=False, allow_infinity=False),
    st.text(max_size=5),
    st.lists(st.text(max_size=3), max_size=5),
    st.dictionaries(st.text(max_size=3), st.integers(), max_size=3),
    st.none(),
)

# Questions may be keyed by integers or strings.
id_st = st.one_of(
    st.integers(min_value=0, max_value=20),
    st.from_regex(r"q[0-9]{1,2}", fullmatch=True),
)


@st.composite
def config_st(draw):
    return ScoringConfig(
        categories=draw(categories_st),
        scoring_method=draw(method_st),
        normalization=draw(normalization_st),
    )


@st.composite
def bank_st(draw):
    """Question bank; ids may repeat and some categories fall outside any config."""
    ids = draw(st.lists(id_st, max_size=12))
    return [
        Question(
            id=question_id,
            category=draw(st.one_of(category_st, st.just("unscored"), st.none())),
            weight=draw(st.one_of(
                st.none(),
                st.floats(min_value=0.1, max_value=5, allow_nan=False, allow_infinity=False),
            )),
        )
        for question_id in ids
    ]


@st.composite
def responses_st(draw, bank):
    ids = [q.id for q in bank] + ["stale-1", 999, None]
    return [
        ResponseRecord(question_id=draw(st.sampled_from(ids)), value=draw(value_st))
        for _ in range(draw(st.integers(min_value=0, max_value=15)))
    ]


# ---------------------------------------------------------------------------
# Property Tests
# ---------------------------------------------------------------------------


class TestScoringEnginePropertyBased:

    @given(config_st(), bank_st())
    @settings(max_examples=200, deadline=None)
    def test_empty_session_is_all_zero(self, config, bank):
        """No responses → every configured category reports 0."""
        result = ScoringEngine().calculate_scores([], config, bank)
        assert result.raw_scores == {c: 0 for c in config.categories}
        assert result.processed_scores == {c: 0 for c in config.categories}

    @given(config_st(), bank_st(), st.data())
    @settings(max_examples=300, deadline=None)
    def test_never_raises_and_keys_match_config(self, config, bank, data):
        """Arbitrary domain data never raises; maps hold exactly the configured keys."""
        responses = data.draw(responses_st(bank))
        result = ScoringEngine().calculate_scores(responses, config, bank)
        assert list(result.raw_scores) == config.categories
        assert list(result.processed_scores) == config.categories
        assert len(result.recommendations) <= 3

    @given(categories_st, st.data())
    @settings(max_examples=300, deadline=None)
    def test_single_answer_ratings_within_percentage_bounds(self, categories, data):
        """Answering each rating question once with 1-5 keeps percentages in [0, 100]."""
        bank = [
            Question(id=f"q{i}", category=data.draw(st.sampled_from(categories)))
            for i in range(data.draw(st.integers(min_value=1, max_value=10)))
        ]
        answered = data.draw(st.lists(st.sampled_from(bank), unique_by=lambda q: q.id))
        responses = [
            ResponseRecord(question_id=q.id, value=data.draw(st.integers(min_value=1, max_value=5)))
            for q in answered
        ]
        config = ScoringConfig(
            categories=categories,
            scoring_method=ScoringMethod.WEIGHTED_SUM,
            normalization=Normalization.PERCENTAGE,
        )
        result = ScoringEngine().calculate_scores(responses, config, bank)
        for score in result.processed_scores.values():
            assert 0 <= score <= 100

    @given(config_st(), bank_st(), st.data())
    @settings(max_examples=200, deadline=None)
    def test_deterministic(self, config, bank, data):
        """Same inputs → same result."""
        responses = data.draw(responses_st(bank))
        engine = ScoringEngine()
        assert engine.calculate_scores(responses, config, bank) == engine.calculate_scores(
            responses, config, bank
        )

    @given(bank_st(), st.data())
    @settings(max_examples=200, deadline=None)
    def test_forced_choice_raw_independent_of_response_order(self, bank, data):
        """Raw totals are sums, so shuffling responses leaves them unchanged."""
        config = ScoringConfig(
            categories=CATEGORY_POOL,
            scoring_method=ScoringMethod.FORCED_CHOICE,
            normalization=Normalization.RAW,
        )
        responses = data.draw(responses_st(bank))
        shuffled = data.draw(st.permutations(responses))
        engine = ScoringEngine()
        original = engine.calculate_scores(responses, config, bank).raw_scores
        reordered = engine.calculate_scores(shuffled, config, bank).raw_scores
        for category in CATEGORY_POOL:
            assert reordered[category] == pytest.approx(original[category])
