from routedoc.matcher import RECURSIVE, SEQUENCES, FindOptions, Kind, find, match
from routedoc.model import Node
from routedoc.estree import from_estree

from builders import arr, ident, lit, obj, prop


def test_match_subset_of_attributes():
	node = from_estree(prop("path", lit("/foo")))
	assert match(node, {"key": {"name": "path"}})
	assert match(node, {"type": "Property", "kind": "init"})
	assert not match(node, {"key": {"name": "method"}})


def test_match_ignores_criteria_key_names():
	node = from_estree(prop("path", lit("/foo")))
	# any attribute of the node may satisfy a criterion
	assert match(node, {"anything": {"name": "path"}})
	assert match(node, {"key": {"value": "/foo"}})


def test_match_scalars():
	assert match("GET", "GET")
	assert not match("GET", "POST")
	assert not match(1, True)
	assert match(None, None)
	assert not match("GET", {"type": "Literal"})
	assert not match(from_estree(lit("GET")), "GET")


def test_match_kind_constraint():
	node = from_estree(lit("GET"))
	assert match(node, {"type": Kind("Literal")})
	assert match(node, {"type": Kind("Identifier", "Literal"), "v": "GET"})
	assert not match(node, {"type": Kind("Identifier")})
	assert not match("Literal", {"type": Kind("Literal")})


def test_find_without_options_is_match():
	node = from_estree(ident("routes"))
	assert find(node, {"name": "routes"}) == [node]
	assert find(node, {"name": "other"}) == []
	assert find(node, {"name": "other"}, FindOptions()) == []


def test_find_into_sequences_is_single_level():
	tree = from_estree(obj(path=lit("/foo"), config=obj(path=lit("/bar"))))
	properties = tree.child("properties")
	found = find(properties, {"type": Kind("Property"), "key": {"name": "path"}}, SEQUENCES)
	assert len(found) == 1
	assert found[0].child("value").child("value") == "/foo"


def test_find_recursive_preorder_and_stable():
	tree = from_estree(obj(a=ident("x"), b=arr(ident("y"), ident("z"))))
	criteria = {"type": Kind("Identifier")}
	names = [n.child("name") for n in find(tree, criteria, RECURSIVE)]
	assert names == ["a", "x", "b", "y", "z"]
	assert find(tree, criteria, RECURSIVE) == find(tree, criteria, RECURSIVE)


def test_find_recursive_stops_at_match():
	tree = from_estree(obj(outer=obj(inner=lit(1))))
	found = find(tree, {"type": Kind("ObjectExpression")}, RECURSIVE)
	assert found == [tree]


def test_find_handles_deep_trees():
	node = Node(kind="Leaf")
	for _ in range(5000):
		node = Node(kind="Wrap", children={"inner": node})
	found = find(node, {"type": Kind("Leaf")}, RECURSIVE)
	assert [n.kind for n in found] == ["Leaf"]
