import io

import pytest

from dynsssp.cli import load_changes, main, run
from dynsssp.dynamic_update import Change, apply_changes
from dynsssp.graph import Graph
from dynsssp.sssp_local import INF, SSSPState


@pytest.fixture
def square():
    return Graph.from_edges([(0, 1, 1), (1, 2, 1), (2, 3, 1), (3, 0, 1)])


def test_load_changes(tmp_path):
    path = tmp_path / "changes.txt"
    path.write_text("insert 1 2\ndelete 3 4\nfoo 5 6\n")
    assert load_changes(path) == [
        Change(True, 1, 2),
        Change(False, 3, 4),
        Change(False, 5, 6),
    ]


def test_load_changes_stops_at_malformed(tmp_path):
    path = tmp_path / "changes.txt"
    path.write_text("insert 0 1 insert x 2 delete 1 2")
    assert load_changes(path) == [Change(True, 0, 1)]


def test_load_changes_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_changes(tmp_path / "absent.txt")


def test_run_matches_direct_application(square):
    changes = [Change(True, 0, 1), Change(False, 1, 2), Change(True, 2, 3)]
    expected = SSSPState.initial(square.num_vertices, 0)
    for start in range(0, len(changes), 2):
        apply_changes(square, expected, changes[start : start + 2])
    result = run(square, changes, 1, 2, io.StringIO())
    assert result == expected.dist


def test_run_parts_agree(square):
    changes = [Change(True, 0, 1), Change(True, 2, 3)]
    single = run(square, changes, 1, 10, io.StringIO())
    split = run(square, changes, 2, 10, io.StringIO())
    assert single == split
    assert single[0] == 0


def test_run_output(square):
    out = io.StringIO()
    run(square, [Change(True, 0, 1), Change(False, 2, 3)], 1, 1, out)
    text = out.getvalue()
    assert "Parts=1" in text
    assert "Batch 2/2 changes=1" in text
    assert "  [INSERT]  Edge (0, 1)" in text
    assert "  [DELETE]  Edge (2, 3)" in text
    assert "SSSP-update completed in" in text


def test_run_without_changes_keeps_initial_distances(square):
    result = run(square, [], 1, 5, io.StringIO())
    assert result == [0, INF, INF, INF]


@pytest.mark.parametrize("parts, batch", [(0, 1), (1, 0)])
def test_run_rejects_bad_arguments(square, parts, batch):
    with pytest.raises(ValueError):
        run(square, [], parts, batch, io.StringIO())


def test_main_runs(tmp_path, capsys):
    graph_path = tmp_path / "graph.txt"
    graph_path.write_text("# comment\n0 1 1\n1 2 1\n")
    changes_path = tmp_path / "changes.txt"
    changes_path.write_text("insert 0 2\n")
    code = main(["--graph", str(graph_path), "--changes", str(changes_path)])
    out = capsys.readouterr().out
    assert code == 0
    assert "Global: V=3 E=2" in out
    assert "Batch 1/1 changes=1" in out


def test_main_missing_graph(tmp_path, capsys):
    code = main(["--graph", str(tmp_path / "none.txt")])
    assert code == 1
    assert "ERROR" in capsys.readouterr().err


def test_main_missing_changes_continues(tmp_path, capsys):
    graph_path = tmp_path / "graph.txt"
    graph_path.write_text("0 1 1\n")
    code = main(["--graph", str(graph_path), "--changes", str(tmp_path / "none.txt")])
    captured = capsys.readouterr()
    assert code == 0
    assert "cannot open" in captured.err
    assert "Batch" not in captured.out