# tests/data_model/q_wrapper/test_q_category.py
from qif_json.data_model import ICategory, QCategory

# --------------------------
# Arrange–Act–Assert (AAA)
# --------------------------


def test_set_full_name_three_levels():
    # Arrange
    c = QCategory()

    # Act
    c.set_full_name("Auto:Fuel:Premium")

    # Assert
    assert (c.name, c.sub_category, c.sub_sub_category) == ("Auto", "Fuel", "Premium")


def test_set_full_name_without_colon_leaves_sub_levels_absent():
    # Arrange
    c = QCategory()

    # Act
    c.set_full_name("Auto")

    # Assert
    assert c.name == "Auto"
    assert c.sub_category is None
    assert c.sub_sub_category is None
    assert c.to_dict() == {"name": "Auto"}


def test_trailing_colon_gives_empty_sub_category():
    # Arrange
    c = QCategory()

    # Act
    c.set_full_name("Auto:")

    # Assert
    assert c.to_dict() == {"name": "Auto", "sub_category": ""}


def test_flags_are_emitted_only_when_set():
    # Arrange
    income = QCategory(name="Salary", income=True)
    plain = QCategory(name="Misc")

    # Act / Assert
    assert income.to_dict() == {"name": "Salary", "income": True}
    assert "income" not in plain.to_dict()
    assert "expense" not in plain.to_dict()


def test_flag_alone_makes_entry_non_empty():
    # Arrange
    c = QCategory(expense=True)

    # Act / Assert
    assert not c.is_empty()
    assert QCategory().is_empty()


def test_conforms_to_icategory():
    assert isinstance(QCategory(), ICategory)
