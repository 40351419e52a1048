
import pytest

from copyguard.files import CopyrightSet, read_ignore_file


@pytest.fixture
def tree(tmp_path):
    for name in [
        "src/main/java/A.java",
        "src/main/resources/config.json",
        "src/main/resources/logo.png",
        "src/main/resources/license.xml",
        "src/test/java/ATest.java",
        "src/test/resources/generated/Gen.java",
        "docs/README.md",
        ".git/HEAD",
    ]:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("", encoding="utf-8")
    return tmp_path.resolve()


def names(files, root):
    return sorted(f.relative_to(root).as_posix() for f in files)


def test_default_excludes(tree):
    files = CopyrightSet().check(tree / "src").files
    assert names(files, tree) == [
        "src/main/java/A.java",
        "src/test/java/ATest.java",
        "src/test/resources/generated/Gen.java",
    ]


def test_git_metadata_is_never_checked(tree):
    files = CopyrightSet().check(tree).files
    assert ".git/HEAD" not in names(files, tree)
    assert "docs/README.md" in names(files, tree)


def test_extra_excludes_are_relative_to_source(tree):
    files = CopyrightSet().check(tree / "src").exclude("/test/resources/", "*.md").files
    assert names(files, tree) == ["src/main/java/A.java", "src/test/java/ATest.java"]


def test_single_file_source(tree):
    files = CopyrightSet().check(tree / "docs" / "README.md").files
    assert names(files, tree) == ["docs/README.md"]


def test_files_are_absolute(tree, monkeypatch):
    monkeypatch.chdir(tree)
    files = CopyrightSet().check("src/main").files
    assert files == {tree / "src/main/java/A.java"}


def test_missing_source(tmp_path):
    with pytest.raises(ValueError):
        CopyrightSet().check(tmp_path / "nope").files


def test_read_ignore_file(tmp_path):
    path = tmp_path / ".copyrightignore"
    path.write_text("# generated sources\n**/generated/\n\n!keep.java\n  *.txt  \n", encoding="utf-8")
    assert read_ignore_file(path) == ["**/generated/", "!keep.java", "*.txt"]
    assert read_ignore_file(tmp_path / "missing") == []


def test_ignore_file_negation(tree):
    copyright_set = CopyrightSet().check(tree / "src")
    copyright_set.exclude("**/*.java", "!**/ATest.java")
    assert names(copyright_set.files, tree) == ["src/test/java/ATest.java"]
