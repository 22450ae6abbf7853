import pytest

from kruskal_mst.parsing import InputFormatError, parse_text, read_csv
from kruskal_mst.structures import Edge, HeapCapacityError


def test_parse_text_converts_to_zero_based_edges():
    graph = parse_text("3 2\n1 2 5\n2 3 -1\n")

    assert graph.vertex_count == 3
    assert graph.edge_count == 2
    assert graph.edges == [Edge(0, 1, 5), Edge(1, 2, -1)]


def test_parse_text_accepts_arbitrary_whitespace():
    graph = parse_text("  2\t1 1\n\n 2   4")
    assert graph.edges == [Edge(0, 1, 4)]


def test_parse_text_with_no_edges():
    graph = parse_text("1 0\n")
    assert graph.edges == []
    assert len(graph.to_heap()) == 0


@pytest.mark.parametrize(
    "text",
    [
        "",
        "4",
        "2 1\n1 two 3\n",
        "2 1\n1 2\n",
        "-1 0\n",
        "2 -3\n",
        "2 1\n0 2 1\n",
        "2 1\n1 3 1\n",
    ],
)
def test_parse_text_rejects_malformed_input(text):
    with pytest.raises(InputFormatError):
        parse_text(text)


def test_more_edges_than_declared_overflow_the_heap():
    graph = parse_text("3 1\n1 2 1\n2 3 1\n")
    with pytest.raises(HeapCapacityError):
        graph.to_heap()


def test_fewer_edges_than_declared_are_tolerated():
    heap = parse_text("3 5\n1 2 1\n").to_heap()
    assert heap.capacity == 5
    assert len(heap) == 1


def test_read_csv_infers_vertex_count(tmp_path):
    path = tmp_path / "graph.csv"
    path.write_text("v1,v2,weight\n1,2,3\n2,5,4\n")

    graph = read_csv(path)

    assert graph.vertex_count == 5
    assert graph.edge_count == 2
    assert graph.edges == [Edge(0, 1, 3), Edge(1, 4, 4)]


def test_read_csv_honours_explicit_vertex_count(tmp_path):
    path = tmp_path / "graph.csv"
    path.write_text("v1,v2,weight\n1,2,3\n")

    assert read_csv(path, vertex_count=6).vertex_count == 6
    with pytest.raises(InputFormatError):
        read_csv(path, vertex_count=1)


def test_read_csv_requires_edge_columns(tmp_path):
    path = tmp_path / "graph.csv"
    path.write_text("source,target,weight\n1,2,3\n")

    with pytest.raises(InputFormatError):
        read_csv(path)


def test_read_csv_rejects_non_integer_weights(tmp_path):
    path = tmp_path / "graph.csv"
    path.write_text("v1,v2,weight\n1,2,heavy\n")

    with pytest.raises(InputFormatError):
        read_csv(path)


def test_read_csv_rejects_fractional_weights(tmp_path):
    path = tmp_path / "graph.csv"
    path.write_text("v1,v2,weight\n1,2,1.5\n")

    with pytest.raises(InputFormatError):
        read_csv(path)
