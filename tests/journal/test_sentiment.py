"""Tests for lexicon-based mood scoring, topic and keyword extraction."""

import pytest

from journal.lexicon import EMOTION_LEXICON, POLARITY_LEXICON
from journal.sentiment import extract_keywords, extract_topics, score_mood


class TestScoreMood:
    """Mood label selection and score normalization."""

    def test_empty_text_is_neutral(self):
        assert score_mood("") == ("neutral", 0.5)

    def test_whitespace_is_neutral(self):
        assert score_mood("   \n\t ") == ("neutral", 0.5)

    def test_no_trigger_words_is_neutral(self):
        assert score_mood("Bought groceries and cooked dinner.") == ("neutral", 0.5)

    def test_three_distinct_hits_saturate(self):
        """happy, joy (in joyful) and wonderful give a full score."""
        label, score = score_mood("I feel so happy and joyful today, what a wonderful day")
        assert label == "joy"
        assert score == 1.0

    def test_single_hit_scores_one_third(self):
        label, score = score_mood("I was scared of the storm")
        assert label == "fear"
        assert score == pytest.approx(1 / 3)

    def test_repeated_word_counts_once(self):
        label, score = score_mood("sad sad sad sad")
        assert label == "sadness"
        assert score == pytest.approx(1 / 3)

    def test_more_than_saturation_capped(self):
        label, score = score_mood("angry, furious, annoyed, frustrated, I hate it")
        assert label == "anger"
        assert score == 1.0

    def test_case_insensitive(self):
        assert score_mood("SO ANXIOUS AND NERVOUS")[0] == "fear"

    def test_substring_match(self):
        """Trigger words match inside longer words."""
        assert score_mood("Lovely weather")[0] == "joy"

    def test_strictly_highest_wins(self):
        label, score = score_mood("happy but sad and miserable")
        assert label == "sadness"
        assert score == pytest.approx(2 / 3)

    def test_tie_goes_to_later_declared_label(self):
        assert score_mood("happy yet sad")[0] == "sadness"
        assert score_mood("worried and angry")[0] == "fear"

    def test_polarity_tie_goes_to_negative(self):
        assert score_mood("happy but awful", POLARITY_LEXICON) == ("negative", pytest.approx(1 / 3))

    def test_polarity_profile(self):
        assert score_mood("an awful, terrible day", POLARITY_LEXICON) == (
            "negative",
            pytest.approx(2 / 3),
        )
        assert score_mood("nothing much", POLARITY_LEXICON) == ("neutral", 0.5)


class TestExtractTopics:
    """Topic matching against the topic lexicon."""

    def test_no_match_falls_back_to_general(self):
        assert extract_topics("Bought groceries.") == ["general"]

    def test_empty_text(self):
        assert extract_topics("") == ["general"]

    def test_work_topic(self):
        topics = extract_topics("Had a great meeting at the office about the new project")
        assert topics == ["work"]

    def test_multiple_topics_in_declaration_order(self):
        topics = extract_topics("Went to the gym, then slept all weekend with family")
        assert topics == ["health", "relationships", "relaxation"]

    def test_no_duplicates(self):
        topics = extract_topics("work work job office career meeting project")
        assert topics == ["work"]

    def test_order_independent_of_text_order(self):
        assert extract_topics("vacation plans, then a job interview") == ["work", "relaxation"]


class TestExtractKeywords:
    """Keyword tokenization, filtering and ranking."""

    def test_only_stop_words_and_short_tokens(self):
        assert extract_keywords("it was ok and fine") == []

    def test_empty_text(self):
        assert extract_keywords("") == []

    def test_ranked_by_frequency(self):
        text = "coffee coffee coffee tea tea garden garden walk"
        assert extract_keywords(text)[:2] == ["coffee", "garden"]

    def test_ties_keep_first_occurrence(self):
        assert extract_keywords("zebra apple mango") == ["zebra", "apple", "mango"]

    def test_at_most_five(self):
        text = "alpha bravo charlie delta echos foxtrot golfs hotel"
        keywords = extract_keywords(text)
        assert keywords == ["alpha", "bravo", "charlie", "delta", "echos"]

    def test_lowercased_and_deduplicated(self):
        assert extract_keywords("Garden GARDEN garden") == ["garden"]

    def test_stop_words_removed(self):
        keywords = extract_keywords("these those would should could might being")
        assert keywords == []

    def test_filler_words_removed(self):
        assert extract_keywords("just fine, okay, fine") == []
        assert extract_keywords("okay garden") == ["garden"]

    def test_length_boundary(self):
        """Three-letter tokens are dropped, four-letter tokens kept."""
        assert extract_keywords("cat dogs") == ["dogs"]

    def test_splits_on_punctuation(self):
        assert extract_keywords("walk,walk;river!river...river") == ["river", "walk"]

    def test_scenario_keywords(self):
        """Six tokens tie at one occurrence; the first five seen are kept."""
        keywords = extract_keywords("I feel so happy and joyful today, what a wonderful day")
        assert keywords == ["feel", "happy", "joyful", "today", "what"]
        assert all(k not in EMOTION_LEXICON.stop_words for k in keywords)
