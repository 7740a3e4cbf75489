"""Unit tests for the skill vocabulary and extractor.

Covers:
- Vocabulary normalization, ordering and immutability
- Substring extraction semantics (no word boundaries)
- Defensive handling of empty and non-string input
- Vocabulary injection
"""

import pytest

from skillmatch.matching import (
    DEFAULT_SKILL_TERMS,
    DEFAULT_VOCABULARY,
    SkillExtractor,
    SkillVocabulary,
    extract_skills,
)


class TestSkillVocabulary:
    """Tests for SkillVocabulary."""

    def test_default_vocabulary_contains_builtin_terms(self):
        """Test the default vocabulary is built from DEFAULT_SKILL_TERMS."""
        assert len(DEFAULT_VOCABULARY) == len(DEFAULT_SKILL_TERMS)
        assert "machine learning" in DEFAULT_VOCABULARY
        assert "node.js" in DEFAULT_VOCABULARY

    def test_terms_are_normalized_and_deduplicated(self):
        """Test terms are stripped, lower-cased and deduplicated in first-seen order."""
        vocabulary = SkillVocabulary([" Python ", "React", "python", "", "  ", "SQL"])

        assert vocabulary.terms == ("python", "react", "sql")
        assert len(vocabulary) == 3

    def test_contains_is_case_insensitive(self):
        """Test membership ignores case and surrounding whitespace."""
        vocabulary = SkillVocabulary(["react"])

        assert "React" in vocabulary
        assert " REACT " in vocabulary
        assert "vue.js" not in vocabulary
        assert 42 not in vocabulary

    def test_extended_returns_new_vocabulary(self):
        """Test extended() leaves the original vocabulary untouched."""
        base = SkillVocabulary(["python"])
        extended = base.extended(["GraphQL", "python"])

        assert base.terms == ("python",)
        assert extended.terms == ("python", "graphql")

    def test_equality_and_hash(self):
        """Test vocabularies with the same ordered terms are equal."""
        assert SkillVocabulary(["a", "b"]) == SkillVocabulary(["A", "b", "a"])
        assert hash(SkillVocabulary(["a", "b"])) == hash(SkillVocabulary(["a", "b"]))
        assert SkillVocabulary(["a", "b"]) != SkillVocabulary(["b", "a"])


class TestSkillExtractor:
    """Tests for SkillExtractor and extract_skills."""

    def test_extracts_known_terms(self):
        """Test basic extraction of vocabulary terms."""
        assert extract_skills("Senior React and Python engineer") == {"react", "python"}

    def test_extraction_is_case_insensitive(self):
        """Test upper-case text still matches lower-case terms."""
        assert extract_skills("PYTHON") == {"python"}

    def test_each_term_reported_once(self):
        """Test repeated mentions produce a single entry."""
        result = extract_skills("python, Python and more python")
        assert result == {"python"}
        assert isinstance(result, frozenset)

    def test_substring_matching_has_no_word_boundaries(self):
        """Test terms match inside longer words."""
        assert "react" in extract_skills("Reactive programming")
        assert "ai" in extract_skills("Maintain servers")
        assert extract_skills("javascript") == {"javascript", "java"}

    def test_multi_word_and_punctuated_terms(self):
        """Test terms containing spaces and punctuation are found literally."""
        result = extract_skills("Machine Learning on Node.js with C++ and UI/UX care")

        assert {"machine learning", "node.js", "c++", "ui/ux"} <= result

    @pytest.mark.parametrize("text", ["", None, 123, ["python"]])
    def test_empty_or_non_string_input(self, text):
        """Test missing or malformed text yields an empty set."""
        assert extract_skills(text) == frozenset()

    def test_unmatched_text_yields_empty_set(self):
        """Test text without vocabulary terms."""
        assert extract_skills("Hello there") == frozenset()

    def test_injected_vocabulary(self):
        """Test extraction only uses the injected vocabulary."""
        extractor = SkillExtractor(SkillVocabulary(["graphql"]))

        assert extractor.extract("GraphQL and React") == {"graphql"}
        assert extract_skills("GraphQL and React", SkillVocabulary(["react"])) == {"react"}

    def test_shared_terms(self):
        """Test shared() intersects extractions from two texts."""
        extractor = SkillExtractor()

        assert extractor.shared("React and Docker", "docker, kubernetes") == {"docker"}
        assert extractor.shared("React", None) == frozenset()

    @pytest.mark.parametrize(
        "text",
        [
            "Blockchain engineer using Solidity and Rust",
            "Machine learning with Python and SQL",
            "javascript developer",
        ],
    )
    def test_re_extraction_is_stable(self, text):
        """Test extracting from the joined result gives back the same terms."""
        extracted = extract_skills(text)
        re_extracted = extract_skills(" ".join(sorted(extracted)))

        assert extracted <= re_extracted
        assert re_extracted <= extracted
