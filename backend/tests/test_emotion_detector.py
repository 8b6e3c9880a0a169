# tests for the emotion detector — keyword scoring, dominant pick, intensity
# unit tests for moodjournal/services/emotion_detector.py

import pytest

from moodjournal.services.emotion_detector import detect, score_emotions
from moodjournal.services.lexicon import EMOTION_LEXICON, EMOTION_LABELS, emoji_for


class TestNoMatches:
    """text without lexicon keywords"""

    @pytest.mark.parametrize("text", [
        "",
        "The train left the station on time this morning.",
        "1234 5678",
    ])
    def test_neutral_result(self, text):
        result = detect(text)
        assert result.emotions == []
        assert result.dominant_emotion == "neutral"
        assert result.intensity == 1


class TestScoring:
    """additive keyword scoring"""

    def test_single_keyword_scores_one(self):
        result = detect("I feel happy today.")
        assert result.emotions == ["happy"]
        assert result.dominant_emotion == "happy"
        assert result.intensity == 1

    def test_matching_is_case_insensitive(self):
        assert detect("I feel HAPPY today.").emotions == ["happy"]

    def test_intensifier_adds_two(self):
        assert score_emotions("I am very sad.") == {"sad": 3}
        assert score_emotions("I am really sad.") == {"sad": 3}

    def test_keyword_counts_once_even_if_repeated(self):
        """a bare repeat of an intensified keyword does not score again"""
        assert score_emotions("I am very sad, so sad.") == {"sad": 3}

    def test_intensifier_without_keyword_scores_nothing(self):
        assert score_emotions("It was a very long, really slow afternoon.") == {}

    def test_keywords_match_as_substrings(self):
        """'stress' is an anxious keyword and also sits inside 'stressed'"""
        scores = score_emotions("I am stressed")
        assert scores == {"anxious": 1, "stressed": 1}

    def test_multiple_keywords_accumulate(self):
        # sad: sad + down
        assert score_emotions("sad and down")["sad"] == 2

    def test_scores_are_positive(self):
        scores = score_emotions("happy sad angry calm tired lonely grateful")
        assert all(score >= 1 for score in scores.values())


class TestOrderingAndDominant:
    """emotion order and dominant tie-break"""

    def test_emotions_follow_lexicon_order(self):
        result = detect("angry at first, then calm, and now happy")
        assert result.emotions == ["happy", "angry", "calm"]

    def test_highest_score_is_dominant(self):
        result = detect("I am happy but really angry")
        assert result.dominant_emotion == "angry"
        assert result.emotions == ["happy", "angry"]

    def test_tie_goes_to_earliest_lexicon_entry(self):
        assert detect("I feel sad but also angry.").dominant_emotion == "sad"
        assert detect("I feel angry but also sad.").dominant_emotion == "sad"

    def test_dominant_is_member_of_emotions(self):
        result = detect("thankful, tired and a little nervous")
        assert result.dominant_emotion in result.emotions

    def test_end_to_end_example(self):
        result = detect("I am very sad and really anxious about tomorrow")
        scores = score_emotions("I am very sad and really anxious about tomorrow")
        assert scores["sad"] == 3
        assert scores["anxious"] == 3
        assert result.dominant_emotion == "sad"


class TestIntensity:
    """intensity = max score + breadth bumps, clamped to 1-10"""

    def test_four_emotions_adds_one(self):
        result = detect("happy sad angry calm")
        assert len(result.emotions) == 4
        assert result.intensity == 2

    def test_six_emotions_adds_two(self):
        result = detect("happy sad angry calm tired lonely")
        assert len(result.emotions) == 6
        assert result.intensity == 3

    def test_three_emotions_no_bump(self):
        assert detect("happy sad angry").intensity == 1

    def test_clamped_to_ten(self):
        text = "very happy very joyful very cheerful very delighted very pleased very content"
        assert score_emotions(text)["happy"] > 10
        assert detect(text).intensity == 10

    def test_every_keyword_at_once_stays_in_range(self):
        text = " ".join(f"really {kw}" for _, keywords in EMOTION_LEXICON for kw in keywords)
        result = detect(text)
        assert len(result.emotions) == len(EMOTION_LABELS)
        assert 1 <= result.intensity <= 10


class TestLexicon:
    """lexicon table shape"""

    def test_labels_are_unique(self):
        assert len(set(EMOTION_LABELS)) == len(EMOTION_LABELS)

    def test_keywords_are_lowercase(self):
        for _, keywords in EMOTION_LEXICON:
            assert all(kw == kw.lower() for kw in keywords)

    def test_emoji_lookup(self):
        assert emoji_for("happy") == "😊"
        assert emoji_for("HAPPY") == "😊"
        assert emoji_for("neutral") == "😐"
