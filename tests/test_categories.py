import pytest

from passkey_grid.categories import Category, ContentCategory

from passkey_grid.markdown import CONFIGURATIONS


def test_category_order() -> None:
    assert [c.identifier for c in Category] == [
        "websites",
        "platforms",
        "developer-tools",
        "security-keys",
    ]


def test_titles() -> None:
    assert Category.developer_tools.title == "Developer Tools"
    assert Category.security_keys.title == "Security Keys"


@pytest.mark.parametrize("category", list(Category))
def test_configuration_column_count_matches_schema(category: Category) -> None:
    configuration = CONFIGURATIONS[category.configuration_name]
    assert configuration.layout.column_count == len(category.columns)


def test_configuration_names() -> None:
    assert Category.websites.configuration_name == "websites"
    assert Category.platforms.configuration_name == "default"
    assert Category.developer_tools.configuration_name == "default"
    assert Category.security_keys.configuration_name == "default"


def test_content_category() -> None:
    content = ContentCategory(Category.websites, "| a |")
    assert content.configuration_name == "websites"
    assert content.source == "| a |"
