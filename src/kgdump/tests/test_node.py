import pytest

from kgdump.config import EmptyTokenPolicy
from kgdump.model.literal import MalformedTokenError
from kgdump.model.node import Node


def test_serialize_keeps_insertion_order_within_predicate():
    node = Node("m.02mjmr")
    node.add_predicate_value("ns:type", "Person").add_predicate_value("ns:type", "Award_Winner")

    assert node.serialize() == (
        "m.02mjmr\tns:type\tPerson\t.\n"
        "m.02mjmr\tns:type\tAward_Winner\t.\n"
    )


def test_empty_node_serializes_to_empty_string():
    node = Node("m.02mjmr")
    assert node.serialize() == ""
    assert str(node) == ""
    assert node.predicate_values == {}


def test_predicates_are_sorted():
    node = Node("m.0x")
    node.add_predicate_value("ns:type", "Person")
    node.add_predicate_value("ns:name", "Ada")
    node.add_predicate_value("ns:alias", "Countess")
    node.add_predicate_value("ns:type", "Mathematician")
    node.add_predicate_value("ns:zodiac", "Sagittarius")

    assert list(node.predicate_values) == ["ns:alias", "ns:name", "ns:type", "ns:zodiac"]
    assert node.serialize() == (
        "m.0x\tns:alias\tCountess\t.\n"
        "m.0x\tns:name\tAda\t.\n"
        "m.0x\tns:type\tPerson\t.\n"
        "m.0x\tns:type\tMathematician\t.\n"
        "m.0x\tns:zodiac\tSagittarius\t.\n"
    )


def test_duplicates_are_kept():
    node = Node("m.0x").add_predicate_value("ns:type", "Person").add_predicate_value("ns:type", "Person")
    assert node.predicate_values == {"ns:type": ["Person", "Person"]}


def test_predicate_values_is_live_and_survives_resort():
    node = Node("m.0x")
    node.add_predicate_value("ns:b", "1")
    view = node.predicate_values
    node.add_predicate_value("ns:a", "2")

    assert view is node.predicate_values
    assert list(view) == ["ns:a", "ns:b"]


def test_serialize_is_repeatable_mid_population():
    node = Node("m.0x").add_predicate_value("ns:name", "Ada")
    first = node.serialize()
    assert node.serialize() == first
    node.add_predicate_value("ns:name", "Augusta")
    assert node.serialize() == first + "m.0x\tns:name\tAugusta\t.\n"


def test_triples():
    node = Node("m.0x").add_predicate_value("ns:b", "2").add_predicate_value("ns:a", "1")
    assert list(node.triples()) == [("m.0x", "ns:a", "1"), ("m.0x", "ns:b", "2")]


def test_from_subject_cleans_uri():
    node = Node.from_subject("<http://rdf.freebase.com/ns/M.02MJMR>")
    assert node.uri == "http://rdf.freebase.com/ns/m.02mjmr"
    assert Node.from_subject("m.02mjmr").uri == "m.02mjmr"


def test_add_object_normalizes():
    node = Node.from_subject("<http://rdf.freebase.com/ns/m.02mjmr>")
    node.add_object("ns:type", "<http://rdf.freebase.com/ns/People.Person>")
    node.add_object("key:wikipedia.en", '"Barack_Hussein_Obama$002C_Jr$002E"')
    node.add_object("ns:name", '"Barack Obama"@en')
    node.add_object("ns:height", "1.85")

    assert node.predicate_values == {
        "key:wikipedia.en": ["Barack_Hussein_Obama,_Jr."],
        "ns:height": ["1.85"],
        "ns:name": ['"Barack Obama"@en'],
        "ns:type": ["http://rdf.freebase.com/ns/people.person"],
    }


def test_add_object_empty_token():
    node = Node("m.0x")
    with pytest.raises(MalformedTokenError):
        node.add_object("ns:name", "")
    assert node.predicate_values == {}

    node.add_object("ns:name", "", policy=EmptyTokenPolicy.OTHER)
    assert node.serialize() == "m.0x\tns:name\t\t.\n"


def test_repr():
    assert repr(Node("m.0x").add_predicate_value("ns:a", "1")) == "Node(uri='m.0x', predicates=1)"


def test_predicates_sort_by_utf16_code_unit():
    node = Node("m.0x")
    node.add_predicate_value("ns:\uffff", "1")
    node.add_predicate_value("ns:\U0001F600", "2")
    node.add_predicate_value("ns:a", "3")

    # U+1F600 is stored as the surrogate pair D83D DE00, which sorts before U+FFFF
    assert list(node.predicate_values) == ["ns:a", "ns:\U0001F600", "ns:\uffff"]
