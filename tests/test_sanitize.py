import pytest

from catalog_sync.core.sanitize import clean_string, clean_strings


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("Café con leche", "Cafe con leche"),
        ("Ñandú #1", "Nandu 1"),
        ("  Arroz   Diana  ", "Arroz Diana"),
        ("P-001", "P-001"),
        ("Aceite 1.5L (x12)", "Aceite 15L x12"),
        ("100%", "100"),
        ("", ""),
    ],
)
def test_clean_string(raw, expected):
    assert clean_string(raw) == expected


def test_clean_strings_walks_nested_values():
    payload = [
        {
            "name": " Jabón  Rey ",
            "vat": 19,
            "price": 2500.5,
            "discount": None,
            "tags": ["Aseo*", {"note": "¡Oferta!"}],
        }
    ]

    assert clean_strings(payload) == [
        {
            "name": "Jabon Rey",
            "vat": 19,
            "price": 2500.5,
            "discount": None,
            "tags": ["Aseo", {"note": "Oferta"}],
        }
    ]


def test_clean_strings_leaves_non_strings_alone():
    assert clean_strings(7) == 7
    assert clean_strings(True) is True
    assert clean_strings(None) is None
