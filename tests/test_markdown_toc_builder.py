import pytest

from mdtoc.errors import DepthBelowRoot, MultipleRootHeadings, NoParentAvailable
from mdtoc.ingest import MarkdownTOCBuilder, TOCBuilderConfig, build, count_markers
from mdtoc.ingest.markdown import _ParseState
from mdtoc.models.heading import HeadingNode, HeadingTree


def _shape(node: HeadingNode):
    return (node.depth, node.name, [_shape(child) for child in node.children])


def test_document_without_headings_returns_none():
    doc = "\nno headers at all\nin this whole doc\nthis will produce no tree\n"

    assert build(doc) is None


def test_second_top_level_heading_is_rejected():
    doc = "\n# Header 1\n## Header 2\n# Header 1 again invalid\n"

    with pytest.raises(MultipleRootHeadings) as excinfo:
        build(doc)

    assert excinfo.value.line_number == 4
    assert excinfo.value.line == "# Header 1 again invalid"


@pytest.mark.parametrize(
    "doc",
    [
        "# One\n# Two\n",
        "# One\nprose\n\n### Deep\n#### Deeper\n# Two\n",
        "## Section\n# Late top level\n",
    ],
)
def test_top_level_heading_after_first_heading_fails(doc):
    with pytest.raises(MultipleRootHeadings):
        build(doc)


def test_first_heading_at_depth_zero_becomes_root():
    tree = build("# Title\nintro\n## Part\n")

    assert tree is not None
    assert not tree.has_synthetic_root
    assert tree.root.name == " Title"
    assert tree.root.raw_line == "# Title"
    assert [child.name for child in tree.root.children] == [" Part"]


def test_mixed_depths_reparent_to_nearest_shallower_ancestor():
    doc = """
## Header 2
##### Header 5
###### Header 6
#### Header 4
### Header 3
##### Header 5
## Header 2 2
"""
    tree = build(doc)

    assert tree is not None
    assert tree.has_synthetic_root
    assert tree.root.depth == 0
    assert [_shape(child) for child in tree.root.children] == [
        (
            1,
            " Header 2",
            [
                (4, " Header 5", [(5, " Header 6", [])]),
                (3, " Header 4", []),
                (2, " Header 3", [(4, " Header 5", [])]),
            ],
        ),
        (1, " Header 2 2", []),
    ]


def test_multi_branched_tree():
    doc = """
# Header 1
hello this is header one

## Header 2
### Header 3
test tester test

## Header 2 2

## Header 2 3

### Header 3 3

#### Header 4 3

###### Header 6 3

### Header 3 4

## Header 2 4

### Header 3 4
"""
    tree = build(doc)

    assert tree is not None
    assert _shape(tree.root) == (
        0,
        " Header 1",
        [
            (1, " Header 2", [(2, " Header 3", [])]),
            (1, " Header 2 2", []),
            (
                1,
                " Header 2 3",
                [
                    (2, " Header 3 3", [(3, " Header 4 3", [(5, " Header 6 3", [])])]),
                    (2, " Header 3 4", []),
                ],
            ),
            (1, " Header 2 4", [(2, " Header 3 4", [])]),
        ],
    )


def test_seven_markers_are_ignored_as_prose():
    # Over-deep marker runs are dropped silently instead of raising or clamping.
    doc = """
# Header 1
## Header 2
### Header 3
#### Header 4
##### Header 5
###### Header 6
####### Header 7 this should be ignored
####### another ignored line
###### Header 6 again
"""
    tree = build(doc)

    assert tree is not None
    names = [node.title for node in tree.headings()]
    assert "Header 7 this should be ignored" not in names
    assert names[-2:] == ["Header 6", "Header 6 again"]

    header_5 = tree.root.children[0].children[0].children[0].children[0]
    assert [child.title for child in header_5.children] == ["Header 6", "Header 6 again"]


def test_over_deep_first_line_does_not_start_the_tree():
    tree = build("####### not a heading\n# Title\n")

    assert tree is not None
    assert tree.root.title == "Title"
    assert len(tree) == 1


def test_heading_name_keeps_raw_spacing_and_markers_without_space():
    tree = build("##   Spaced out  \n###Tight\n")

    assert tree is not None
    section = tree.root.children[0]
    assert section.name == "   Spaced out  "
    assert section.title == "Spaced out"
    assert section.children[0].name == "Tight"


def test_accepts_iterable_of_lines_with_terminators():
    tree = build(["# Title\r\n", "\n", "## Part\n"])

    assert tree is not None
    assert tree.root.children[0].raw_line == "## Part"


def test_builder_is_reusable_across_documents():
    builder = MarkdownTOCBuilder()
    trees = list(builder.build_many(["# One\n## A\n", "# Two\n", "plain text"]))

    assert [tree.root.title if tree is not None else None for tree in trees] == ["One", "Two", None]


def test_configured_max_depth_ignores_deeper_headings():
    tree = build("# Title\n## Part\n### Detail\n", TOCBuilderConfig(max_depth=2))

    assert tree is not None
    assert [node.title for node in tree.headings()] == ["Title", "Part"]


def test_builder_config_validates_bounds():
    with pytest.raises(ValueError):
        TOCBuilderConfig(max_depth=7)
    with pytest.raises(ValueError):
        TOCBuilderConfig(marker="##")


def test_count_markers_only_counts_leading_run():
    assert count_markers("### a # b") == 3
    assert count_markers(" # indented") == 0
    assert count_markers("") == 0


def test_climb_path_guards():
    builder = MarkdownTOCBuilder()
    root = HeadingNode(depth=1, name=" Odd root")
    state = _ParseState(tree=HeadingTree(root=root), path=[], depth=3)

    with pytest.raises(NoParentAvailable):
        builder._climb_path(state, HeadingNode(depth=2, name=" X"), 5)
    with pytest.raises(DepthBelowRoot):
        builder._climb_path(state, HeadingNode(depth=0, name=" Y"), 6)
