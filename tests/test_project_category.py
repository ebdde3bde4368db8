from www.models.project import ProjectCategory


def test_categories_iterate_in_declaration_order():
    assert [c.value for c in ProjectCategory] == ["production", "toy"]


def test_default_is_production():
    assert ProjectCategory.default() is ProjectCategory.PRODUCTION


def test_parse_recognizes_url_names_only():
    assert ProjectCategory.parse("toy") is ProjectCategory.TOY
    assert ProjectCategory.parse("Toy") is None
    assert ProjectCategory.parse("garden") is None
    assert ProjectCategory.parse("") is None


def test_coerce_falls_back_to_default():
    assert ProjectCategory.coerce("garden") is ProjectCategory.PRODUCTION
    assert ProjectCategory.coerce(None) is ProjectCategory.PRODUCTION
    assert ProjectCategory.coerce("toy") is ProjectCategory.TOY


def test_display_titles():
    assert ProjectCategory.PRODUCTION.display_title == "Production Projects"
    assert ProjectCategory.TOY.display_title == "Toy Projects"
    assert str(ProjectCategory.TOY) == "toy"
