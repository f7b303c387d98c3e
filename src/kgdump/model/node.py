# kgdump/model/node.py
from __future__ import annotations
from typing import Dict, Iterator, List, Optional, Tuple

from kgdump.config import EmptyTokenPolicy
from kgdump.model.literal import clean_uri, normalize


def predicate_sort_key(predicate: str) -> bytes:
    """Order predicates by UTF-16 code unit, as the Freebase tooling does."""
    return predicate.encode("utf-16-be", "surrogatepass")


class Node:
    """
    A node of a Freebase-style knowledge graph: one subject URI and every
    (predicate, value) fact seen for it. A node can be a topic, a compound
    value type (CVT), or other metadata such as a type.

    Predicates are kept sorted; values of one predicate keep the order they
    were added in, duplicates included.
    """

    def __init__(self, uri: str):
        self._uri = uri
        self._predicate_values: Dict[str, List[str]] = {}

    @classmethod
    def from_subject(cls, subject: str) -> Node:
        """Create a node from a raw subject token such as `<http://rdf.freebase.com/ns/m.02mjmr>`."""
        return cls(clean_uri(subject))

    @property
    def uri(self) -> str:
        return self._uri

    @property
    def predicate_values(self) -> Dict[str, List[str]]:
        # live mapping, owned by the node
        return self._predicate_values

    def add_predicate_value(self, predicate: str, value: str) -> Node:
        values = self._predicate_values.get(predicate)
        if values is None:
            values = self._insert_predicate(predicate)
        values.append(value)
        return self

    def add_object(self, predicate: str, raw_object: str, policy: Optional[EmptyTokenPolicy] = None) -> Node:
        """Normalize a raw N-Triples object token and add it under `predicate`."""
        return self.add_predicate_value(predicate, normalize(raw_object, policy))

    def _insert_predicate(self, predicate: str) -> List[str]:
        values: List[str] = []
        last = next(reversed(self._predicate_values), None)
        if last is not None and predicate_sort_key(predicate) < predicate_sort_key(last):
            # re-sort in place so references handed out earlier stay valid
            items = sorted([*self._predicate_values.items(), (predicate, values)], key=lambda item: predicate_sort_key(item[0]))
            self._predicate_values.clear()
            self._predicate_values.update(items)
        else:
            self._predicate_values[predicate] = values
        return values

    def triples(self) -> Iterator[Tuple[str, str, str]]:
        for predicate, values in self._predicate_values.items():
            for value in values:
                yield self._uri, predicate, value

    def serialize(self) -> str:
        return "".join(f"{s}\t{p}\t{o}\t.\n" for s, p, o in self.triples())

    def __str__(self) -> str:
        return self.serialize()

    def __repr__(self) -> str:
        return f"Node(uri={self._uri!r}, predicates={len(self._predicate_values)})"
