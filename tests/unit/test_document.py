from collections.abc import Mapping
from typing import TYPE_CHECKING

import pytest

from jsondocs import (
    Document,
    DuplicateKeyError,
    InvalidValueError,
    KeyNotFoundError,
    ValueKind,
)

if TYPE_CHECKING:
    from collections.abc import Callable


class TestDocumentConstruction:
    def test_new_document_is_empty(self) -> None:
        doc = Document(7)

        assert doc.handle == 7
        assert doc.count() == 0
        assert doc.arrays() == []

    def test_repr(self) -> None:
        doc = Document(3)
        doc.add_field("age", "25", ValueKind.NUMBER)

        assert repr(doc) == "Document(handle=3, fields=1, arrays=0)"

    def test_is_a_mapping(self) -> None:
        assert isinstance(Document(1), Mapping)


class TestDocumentAddField:
    def test_add_field_stores_text_unchanged(self) -> None:
        doc = Document(1)
        doc.add_field("name", '"John"', ValueKind.STRING)

        assert doc["name"] == '"John"'

    def test_add_field_with_integer_kind(self) -> None:
        doc = Document(1)
        doc.add_field("flag", "true", 3)

        assert doc.get("flag") == "true"

    def test_duplicate_key_rejected_and_original_kept(self) -> None:
        doc = Document(1)
        doc.add_field("age", "25", ValueKind.NUMBER)

        with pytest.raises(DuplicateKeyError, match="scalar field 'age' already exists"):
            doc.add_field("age", "30", ValueKind.NUMBER)
        assert doc["age"] == "25"

    def test_duplicate_checked_before_validation(self) -> None:
        doc = Document(1)
        doc.add_field("age", "25", ValueKind.NUMBER)

        with pytest.raises(DuplicateKeyError):
            doc.add_field("age", "not_a_number", ValueKind.NUMBER)

    def test_invalid_value_leaves_document_untouched(self) -> None:
        doc = Document(1)

        with pytest.raises(InvalidValueError):
            doc.add_field("invalid", "not_a_number", ValueKind.NUMBER)
        assert "invalid" not in doc
        assert doc.count() == 0


class TestDocumentModifyField:
    def test_modify_overwrites(self) -> None:
        doc = Document(1)
        doc.add_field("age", "25", ValueKind.NUMBER)
        doc.modify_field("age", "26", ValueKind.NUMBER)

        assert doc["age"] == "26"

    def test_modify_validates_against_new_kind(self) -> None:
        doc = Document(1)
        doc.add_field("age", "25", ValueKind.NUMBER)
        doc.modify_field("age", '"twenty-five"', ValueKind.STRING)

        assert doc["age"] == '"twenty-five"'

    def test_modify_missing_key(self) -> None:
        doc = Document(1)

        with pytest.raises(KeyNotFoundError, match="scalar field 'age' not found"):
            doc.modify_field("age", "25", ValueKind.NUMBER)

    def test_modify_invalid_value_keeps_old_value(self) -> None:
        doc = Document(1)
        doc.add_field("age", "25", ValueKind.NUMBER)

        with pytest.raises(InvalidValueError):
            doc.modify_field("age", "twenty", ValueKind.NUMBER)
        assert doc["age"] == "25"


class TestDocumentDeleteField:
    def test_delete_field(self) -> None:
        doc = Document(1)
        doc.add_field("age", "25", ValueKind.NUMBER)
        doc.delete_field("age")

        assert "age" not in doc
        assert doc.get("age") is None

    def test_delete_missing_field(self) -> None:
        doc = Document(1)

        with pytest.raises(KeyNotFoundError) as exc:
            doc.delete_field("age")
        assert exc.value.key == "age"
        assert exc.value.namespace == "scalar"
        assert exc.value.handle == 1

    def test_key_not_found_is_a_key_error(self) -> None:
        doc = Document(1)

        with pytest.raises(KeyError):
            doc.delete_field("age")


class TestDocumentReplaceScalarFields:
    def test_replace_discards_existing(
        self, make_document: "Callable[..., Document]"
    ) -> None:
        doc = make_document(fields={"age": ("25", ValueKind.NUMBER)})
        doc.replace_scalar_fields({"name": '"Ann"'})

        assert doc.items() == [("name", '"Ann"')]

    def test_replace_skips_validation(self) -> None:
        doc = Document(1)
        doc.replace_scalar_fields({"age": "not_a_number"})

        assert doc["age"] == "not_a_number"

    def test_replace_keeps_arrays(self, make_document: "Callable[..., Document]") -> None:
        doc = make_document(arrays={"tags": ["a"]})
        doc.replace_scalar_fields({})

        assert doc.get_array("tags") == ("a",)

    def test_replace_copies_mapping(self) -> None:
        doc = Document(1)
        fields = {"a": "1"}
        doc.replace_scalar_fields(fields)
        fields["b"] = "2"

        assert doc.keys() == ["a"]


class TestDocumentArrays:
    def test_add_array_preserves_order_and_duplicates(self) -> None:
        doc = Document(1)
        doc.add_array("tags", ["b", "a", "b"])

        assert doc.get_array("tags") == ("b", "a", "b")
        assert doc.has_array("tags")

    def test_add_array_accepts_any_iterable(self) -> None:
        doc = Document(1)
        doc.add_array("letters", iter("xyz"))

        assert doc.get_array("letters") == ("x", "y", "z")

    def test_add_array_copies_input(self) -> None:
        doc = Document(1)
        elements = ["a"]
        doc.add_array("tags", elements)
        elements.append("b")

        assert doc.get_array("tags") == ("a",)

    def test_duplicate_array_rejected(self) -> None:
        doc = Document(1)
        doc.add_array("tags", ["a"])

        with pytest.raises(DuplicateKeyError, match="array field 'tags' already exists"):
            doc.add_array("tags", ["b"])
        assert doc.get_array("tags") == ("a",)

    def test_array_and_scalar_namespaces_independent(self) -> None:
        doc = Document(1)
        doc.add_field("tags", '"x"', ValueKind.STRING)
        doc.add_array("tags", ["a"])

        assert doc["tags"] == '"x"'
        assert doc.get_array("tags") == ("a",)

    def test_delete_array(self) -> None:
        doc = Document(1)
        doc.add_array("tags", ["a"])
        doc.delete_array("tags")

        assert not doc.has_array("tags")
        assert doc.get_array("tags") is None

    def test_delete_missing_array(self) -> None:
        doc = Document(1)
        doc.add_field("tags", '"x"', ValueKind.STRING)

        with pytest.raises(KeyNotFoundError, match="array field 'tags' not found"):
            doc.delete_array("tags")
        assert doc["tags"] == '"x"'


class TestDocumentReadInterface:
    def test_getitem_missing_raises(self) -> None:
        doc = Document(1)

        with pytest.raises(KeyNotFoundError):
            _ = doc["missing"]

    def test_get_with_default(self) -> None:
        doc = Document(1)

        assert doc.get("missing", "") == ""

    def test_insertion_order(self, make_document: "Callable[..., Document]") -> None:
        doc = make_document(
            fields={
                "b": ("1", ValueKind.NUMBER),
                "a": ("2", ValueKind.NUMBER),
                "c": ("null", ValueKind.NULL),
            }
        )

        assert list(doc) == ["b", "a", "c"]
        assert doc.keys() == ["b", "a", "c"]
        assert doc.values() == ["1", "2", "null"]
        assert len(doc) == 3

    def test_contains_non_string(self) -> None:
        doc = Document(1)
        doc.add_field("1", "1", ValueKind.NUMBER)

        assert 1 not in doc
        assert "1" in doc

    def test_find(self, make_document: "Callable[..., Document]") -> None:
        doc = make_document(
            fields={
                "a": ("1", ValueKind.NUMBER),
                "b": ('"x"', ValueKind.STRING),
                "c": ("2", ValueKind.NUMBER),
            }
        )

        numbers = doc.find(lambda _key, value: value.isdigit())
        assert numbers == [("a", "1"), ("c", "2")]
        assert doc.find(lambda _key, value: value.isdigit(), limit=1) == [("a", "1")]

    def test_equality(self, make_document: "Callable[..., Document]") -> None:
        first = make_document(handle=1, fields={"a": ("1", ValueKind.NUMBER)})
        second = make_document(handle=2, fields={"a": ("1", ValueKind.NUMBER)})

        assert first == second
        second.add_array("tags", [])
        assert first != second
