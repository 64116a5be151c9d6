import pytest

from status_center.services import severity

LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


class TestRank:
    def test_fixed_mapping(self):
        assert [severity.rank(l) for l in LEVELS] == [0, 1, 2, 3]

    def test_case_insensitive(self):
        assert severity.rank("warning") == 2
        assert severity.rank(" Error ") == 3

    @pytest.mark.parametrize("level", ["bogus", "NOTICE", "", None, "CRITICAL"])
    def test_unknown_ranks_as_info(self, level):
        assert severity.rank(level) == severity.rank("INFO") == 1

    def test_normalize(self):
        assert severity.normalize("warning") == "WARNING"
        assert severity.normalize(None) == "INFO"
        assert severity.normalize("   ") == "INFO"

    def test_is_known(self):
        assert severity.is_known("debug")
        assert not severity.is_known("notice")


class TestShouldPersist:
    @pytest.mark.parametrize("incoming", LEVELS)
    @pytest.mark.parametrize("minimum", LEVELS)
    def test_matches_rank_comparison(self, incoming, minimum):
        expected = LEVELS.index(incoming) >= LEVELS.index(minimum)
        assert severity.should_persist(incoming, minimum) is expected

    def test_tie_is_inclusive(self):
        assert severity.should_persist("WARNING", "warning")

    def test_unknown_incoming_behaves_like_info(self):
        assert severity.should_persist("bogus", "info") == severity.should_persist("info", "info")
        assert severity.should_persist("bogus", "info") is True
        assert severity.should_persist("bogus", "warning") is False

    def test_unknown_minimum_behaves_like_info(self):
        assert severity.should_persist("DEBUG", "nonsense") is False
        assert severity.should_persist("INFO", "nonsense") is True
