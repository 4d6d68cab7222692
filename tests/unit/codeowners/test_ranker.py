import textwrap

from reviewflow.codeowners.models import Rule, Section
from reviewflow.codeowners.parser import DefaultDialect
from reviewflow.codeowners.ranker import rank_section_owners

SECTION = DefaultDialect().parse(
    textwrap.dedent(
        """
        * @john
        yarn.lock
        packages/a/ @maria
        packages/b/ @jimmy
        packages/d/ @maria @jimmy
        packages/e/ @jimmy
        """
    )
)[0]


class TestRankSectionOwners:
    def test_owner_of_more_files_ranks_first(self) -> None:
        files = ["packages/d/x", "packages/e/y", "yarn.lock"]
        assert rank_section_owners(files, SECTION) == ["@jimmy", "@maria", "@john"]

    def test_ties_keep_first_encounter_order(self) -> None:
        files = ["packages/b/x", "packages/a/y"]
        assert rank_section_owners(files, SECTION) == ["@jimmy", "@maria", "@john"]

    def test_global_owners_come_last(self) -> None:
        section = Section(
            rules=(
                Rule(pattern="*", owners=("@a", "@b", "@c")),
                Rule(pattern="src/", owners=("@c",)),
            )
        )
        assert rank_section_owners(["src/app.py"], section) == ["@c", "@a", "@b"]

    def test_orphaned_files_do_not_trigger_fallback(self) -> None:
        assert rank_section_owners(["yarn.lock"], SECTION) == []

    def test_repeated_owner_counts_once_per_file(self) -> None:
        section = Section(
            rules=(
                Rule(pattern="a/", owners=("@x", "@x")),
                Rule(pattern="b/", owners=("@y",)),
                Rule(pattern="c/", owners=("@y",)),
            )
        )
        # @x appears twice on one file, @y once on each of two files
        assert rank_section_owners(["a/1", "b/1", "c/1"], section) == ["@y", "@x"]

    def test_section_without_global_rule(self) -> None:
        section = Section(name="Docs", rules=(Rule(pattern="*.md", owners=("@docs",)),))
        assert rank_section_owners(["README.md", "src/app.py"], section) == ["@docs"]

    def test_last_global_rule_supplies_fallback(self) -> None:
        section = Section(rules=(Rule(pattern="*", owners=("@old",)), Rule(pattern="*", owners=("@new",))))
        assert rank_section_owners(["README.md"], section) == ["@new"]

    def test_no_files(self) -> None:
        assert rank_section_owners([], SECTION) == []
