import pytest

from dstructs.bitree import (
    SAMPLE,
    BiTNode,
    build_bitree,
    count_nodes,
    depth,
    inorder,
    inorder_iterative,
    level_order,
    main,
    postorder,
    postorder_iterative,
    preorder,
    preorder_iterative,
)

SECOND_SAMPLE = "abd*fi****c*egjkmn****l***h**"


def _labels(text):
    return [c for c in text if c != "*"]


def test_sample_preorder_follows_input_order():
    tree = build_bitree(SAMPLE)
    assert preorder(tree) == _labels(SAMPLE)


def test_sample_inorder_and_postorder():
    tree = build_bitree(SAMPLE)
    assert inorder(tree) == list("46213758")
    assert postorder(tree) == list("64278531")


def test_sample_depth():
    assert depth(build_bitree(SAMPLE)) == 4


@pytest.mark.parametrize("text", [SAMPLE, SECOND_SAMPLE, "*", "a**", "abc****"])
def test_iterative_traversals_match_recursive(text):
    tree = build_bitree(text)
    assert preorder_iterative(tree) == preorder(tree)
    assert inorder_iterative(tree) == inorder(tree)
    assert postorder_iterative(tree) == postorder(tree)


@pytest.mark.parametrize("text", [SAMPLE, SECOND_SAMPLE])
def test_count_nodes_matches_labels(text):
    tree = build_bitree(text)
    assert count_nodes(tree) == len(_labels(text))
    assert sorted(level_order(tree)) == sorted(_labels(text))
    assert level_order(tree)[0] == text[0]


def test_empty_tree():
    tree = build_bitree("*")
    assert tree is None
    assert count_nodes(tree) == 0
    assert depth(tree) == 0
    assert preorder(tree) == []
    assert level_order(tree) == []


def test_left_chain_depth_equals_node_count():
    tree = build_bitree("abc****")
    assert depth(tree) == count_nodes(tree)
    assert tree.left.left.data == "c"


def test_trailing_characters_are_ignored():
    assert build_bitree(SAMPLE + "xyz") == build_bitree(SAMPLE)


def test_single_node():
    assert build_bitree("q**") == BiTNode("q")


@pytest.mark.parametrize("text", ["", "12*", "a*"])
def test_truncated_sequence_raises(text):
    with pytest.raises(ValueError):
        build_bitree(text)


def test_main_reports_sequence(capsys):
    assert main([SAMPLE]) == 0
    out = capsys.readouterr().out
    assert f"Node count:\t{len(_labels(SAMPLE))}" in out
    assert "Preorder (recursive):\t" + " ".join(_labels(SAMPLE)) in out


def test_main_rejects_incomplete_sequence(capsys):
    assert main(["12"]) == 1
    assert "error" in capsys.readouterr().err