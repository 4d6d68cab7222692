import pytest

from reviewflow.codeowners.matcher import compile_pattern, matches, normalize_path


class TestMatches:
    """Gitignore-style matching of CODEOWNERS patterns."""

    @pytest.mark.parametrize("file_path", ["README.md", "src/app.py", "a/b/c/d.txt"])
    def test_global_pattern_matches_everything(self, file_path: str) -> None:
        assert matches("*", file_path) is True

    @pytest.mark.parametrize(
        "pattern, file_path, expected",
        [
            ("packages/d/", "packages/d/package.json", True),
            ("packages/d/", "packages/d/src/index.ts", True),
            ("packages/d/", "packages/d", True),
            ("packages/d/", "packages/dd/package.json", False),
            ("packages/d/", "other/packages/d/package.json", False),
            ("docs/", "docs/guide.md", True),
            ("docs/", "src/docs/guide.md", True),
        ],
    )
    def test_directory_patterns(self, pattern: str, file_path: str, expected: bool) -> None:
        assert matches(pattern, file_path) is expected

    @pytest.mark.parametrize(
        "pattern, file_path, expected",
        [
            ("*.txt", "notes.txt", True),
            ("*.txt", "model/db/CHANGELOG.txt", True),
            ("*.txt", "notes.txt.bak", False),
            ("yarn.lock", "yarn.lock", True),
            ("yarn.lock", "packages/a/yarn.lock", True),
            ("yarn.lock", "yarn.locked", False),
        ],
    )
    def test_unanchored_patterns_match_at_any_depth(self, pattern: str, file_path: str, expected: bool) -> None:
        assert matches(pattern, file_path) is expected

    @pytest.mark.parametrize(
        "pattern, file_path, expected",
        [
            ("config/db/database-setup.md", "config/db/database-setup.md", True),
            ("config/db/database-setup.md", "other/config/db/database-setup.md", False),
            ("/build", "build/output.js", True),
            ("/build", "src/build/output.js", False),
            ("src/*.py", "src/app.py", True),
            ("src/*.py", "src/pkg/app.py", False),
        ],
    )
    def test_patterns_with_slash_are_anchored(self, pattern: str, file_path: str, expected: bool) -> None:
        assert matches(pattern, file_path) is expected

    @pytest.mark.parametrize(
        "pattern, file_path, expected",
        [
            ("**/logs", "logs/today.log", True),
            ("**/logs", "deep/nested/logs/today.log", True),
            ("docs/**", "docs/a/b.md", True),
            ("docs/**", "src/docs/a.md", False),
            ("a/**/b", "a/b", True),
            ("a/**/b", "a/x/y/b", True),
            ("file?.md", "file1.md", True),
            ("file?.md", "file10.md", False),
            ("[0-3]*.md", "2-notes.md", True),
            ("[!0-3]*.md", "2-notes.md", False),
        ],
    )
    def test_wildcards(self, pattern: str, file_path: str, expected: bool) -> None:
        assert matches(pattern, file_path) is expected

    def test_literal_matches_file_or_directory(self) -> None:
        assert matches("src/app", "src/app") is True
        assert matches("src/app", "src/app/main.py") is True
        assert matches("src/app", "src/application.py") is False

    @pytest.mark.parametrize("pattern", ["!README.md", "/", "[]"])
    def test_unusable_patterns_never_match(self, pattern: str) -> None:
        assert matches(pattern, "README.md") is False

    def test_leading_dot_slash_in_path_is_ignored(self) -> None:
        assert normalize_path("./src/app.py") == "src/app.py"
        assert matches("src/", "./src/app.py") is True


class TestCompilePattern:
    def test_compiled_patterns_are_cached(self) -> None:
        assert compile_pattern("src/*.py") is compile_pattern("src/*.py")

    def test_regex_characters_are_escaped(self) -> None:
        assert matches("a+b.txt", "a+b.txt") is True
        assert matches("a+b.txt", "aab.txt") is False
