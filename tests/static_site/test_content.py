import pytest

from typing import Optional, Tuple

from pathlib import Path

from passkey_grid.categories import Category, ContentCategory

from passkey_grid.static_site.exceptions import (
    NotADirectoryError,
    MissingCategorySourceError,
    MultipleCategorySourcesError,
)

from passkey_grid.static_site.content import (
    find_category_source,
    load_category_source,
    load_category_sources,
    read_table_header,
    check_table_header,
)


def populate(directory: Path) -> None:
    for category in Category:
        (directory / f"{category.identifier}.md").write_text(
            f"# {category.title}\n", encoding="utf-8"
        )


class TestFindCategorySource:
    def test_exact_name(self, tmp_path: Path) -> None:
        populate(tmp_path)
        assert (
            find_category_source(tmp_path, Category.security_keys)
            == tmp_path / "security-keys.md"
        )

    @pytest.mark.parametrize(
        "filename", ["Developer-Tools.md", "developer_tools.md", "DEVELOPER_TOOLS.MD"]
    )
    def test_alternative_names(self, tmp_path: Path, filename: str) -> None:
        (tmp_path / filename).write_text("")
        assert (
            find_category_source(tmp_path, Category.developer_tools)
            == tmp_path / filename
        )

    def test_ignores_other_files(self, tmp_path: Path) -> None:
        (tmp_path / "websites.txt").write_text("")
        (tmp_path / "websites.md").mkdir()
        with pytest.raises(MissingCategorySourceError):
            find_category_source(tmp_path, Category.websites)

    def test_missing(self, tmp_path: Path) -> None:
        with pytest.raises(MissingCategorySourceError):
            find_category_source(tmp_path, Category.websites)

    def test_multiple(self, tmp_path: Path) -> None:
        (tmp_path / "security-keys.md").write_text("")
        (tmp_path / "security_keys.md").write_text("")
        with pytest.raises(MultipleCategorySourcesError):
            find_category_source(tmp_path, Category.security_keys)

    def test_not_a_directory(self, tmp_path: Path) -> None:
        with pytest.raises(NotADirectoryError):
            find_category_source(tmp_path / "nope", Category.websites)


def test_load_category_source(tmp_path: Path) -> None:
    (tmp_path / "platforms.md").write_text("| Logo | Name |\n", encoding="utf-8")
    assert load_category_source(tmp_path, Category.platforms) == ContentCategory(
        Category.platforms, "| Logo | Name |\n"
    )


def test_load_category_sources(tmp_path: Path) -> None:
    populate(tmp_path)
    contents = load_category_sources(tmp_path)
    assert [content.category for content in contents] == list(Category)
    assert contents[2].source == "# Developer Tools\n"


@pytest.mark.parametrize(
    "source, exp",
    [
        ("", None),
        ("Just some text\n\n- and a list", None),
        ("| a | b |\n| - | - |\n| 1 | 2 |", ("a", "b")),
        ("a | b\n--- | :-:\n1 | 2", ("a", "b")),
        ("Intro\n\n| Logo |Name|\n|:---|---:|", ("Logo", "Name")),
        # Not followed by a delimiter row
        ("| a | b |\n| c | d |", None),
        # Tables in code blocks are not tables
        ("```\n| a | b |\n| - | - |\n```", None),
        (
            "```\n| a | b |\n| - | - |\n```\n\n| Logo | Name |\n| - | - |\n| x | y |",
            ("Logo", "Name"),
        ),
        # Escaped pipes are part of the label
        ("| Logo | Name \\| alias |\n| - | - |", ("Logo", "Name | alias")),
    ],
)
def test_read_table_header(source: str, exp: Optional[Tuple[str, ...]]) -> None:
    assert read_table_header(source) == exp


class TestCheckTableHeader:
    def test_matches(self) -> None:
        content = ContentCategory(
            Category.websites,
            "| Logo | Name | Features | Link |\n| - | - | - | - |\n",
        )
        assert check_table_header(content) is None

    def test_wrong_columns(self) -> None:
        content = ContentCategory(
            Category.websites, "| Logo | Name | Features |\n| - | - | - |\n"
        )
        mismatch = check_table_header(content)
        assert mismatch is not None
        assert mismatch.found == ("Logo", "Name", "Features")
        assert mismatch.expected == ("Logo", "Name", "Features", "Link")
        assert mismatch.description == (
            "Websites: table header is Logo | Name | Features "
            "(expected Logo | Name | Features | Link)"
        )

    def test_table_after_code_block(self) -> None:
        content = ContentCategory(
            Category.platforms,
            "```\n| a | b |\n| - | - |\n```\n\n"
            "| Logo | Name | Features |\n| - | - | - |\n| x | y | z |\n",
        )
        assert check_table_header(content) is None

    def test_no_table(self) -> None:
        mismatch = check_table_header(ContentCategory(Category.platforms, "Hi"))
        assert mismatch is not None
        assert mismatch.found is None
        assert mismatch.description == (
            "Platforms: no table found (expected Logo | Name | Features)"
        )
