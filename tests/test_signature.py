"""Tests for signature construction and parsing."""

from javadoc_to_md.signature import (
    display_name,
    erase_type,
    member_signature,
    parse_member_part,
    simple_type_name,
    split_member,
    type_signature,
)


def test_erase_type() -> None:
    """Generics, annotations and final are removed; varargs become arrays."""
    assert erase_type("final Map<K, List<V>>") == "Map"
    assert erase_type("String...") == "String[]"
    assert erase_type("@NonNull List<String>") == "List"
    assert erase_type("int [ ]") == "int[]"


def test_simple_type_name() -> None:
    """The package qualifier is dropped but array dimensions are kept."""
    assert simple_type_name("java.util.List<String>[]") == "List[]"
    assert simple_type_name("Map.Entry") == "Entry"
    assert simple_type_name("int") == "int"


def test_type_and_member_signatures() -> None:
    """Signatures follow the p.A / p.A.In / p.A#m(int) scheme."""
    assert type_signature("p", "A") == "p.A"
    assert type_signature("", "A") == "A"
    assert type_signature("p", "In", "p.A") == "p.A.In"
    assert member_signature("p.A", "f") == "p.A#f"
    assert member_signature("p.A", "m", []) == "p.A#m()"
    assert member_signature("p.A", "m", ["int", "List<String>"]) == "p.A#m(int,List)"


def test_split_member() -> None:
    """Members split at the hash; types have no member part."""
    assert split_member("p.A#m(int)") == ("p.A", "m(int)")
    assert split_member("p.A") == ("p.A", "")


def test_parse_member_part() -> None:
    """Parameter lists tolerate names, final and generics."""
    assert parse_member_part("m") == ("m", None)
    assert parse_member_part("m()") == ("m", [])
    assert parse_member_part("m(int, String)") == ("m", ["int", "String"])
    assert parse_member_part("m(int count, final List<String> names)") == (
        "m",
        ["int", "List"],
    )


def test_display_name() -> None:
    """Display names drop the package and space out parameters."""
    assert display_name("p.A#m(int,String)", "p") == "A.m(int, String)"
    assert display_name("p.A.In", "p") == "A.In"
    assert display_name("p.A#f") == "p.A.f"
