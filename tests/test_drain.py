import csv

import numpy as np
import pytest

import drain
from drain import DrainParams, drain_entries, main, read_input
from entries import Entry, generate_entries, generate_random_entries


def write_input(path, lines):
    path.write_text("\n".join(lines) + "\n")
    return str(path)


def read_output(output_dir):
    with open(output_dir / drain.OUTPUT_FILENAME, newline='') as output_file:
        return list(csv.DictReader(output_file))


def test_read_input_defaults(tmp_path):
    params = DrainParams()
    read_input(params, write_input(tmp_path / "input.txt", ["# nothing set", ""]))
    assert params.order == "min"
    assert params.entries_from_file == 0
    assert params.n_entries == 0
    assert params.seed is None
    assert params.check_invariant == 0


def test_read_input_parameters(tmp_path):
    params = DrainParams()
    read_input(params, write_input(tmp_path / "input.txt", [
        "order = max",
        "generate_entries_from_file = true",
        "entries_filename = entries.csv",
        "n_entries = 12",
        "average_priority = 3.5",
        "priority_spread = 0.5",
        "seed = 42",
        "check_invariant = true",
    ]))
    assert params.order == "max"
    assert params.entries_from_file == 1
    assert params.entries_filename == "entries.csv"
    assert params.n_entries == 12
    assert params.average_priority == 3.5
    assert params.priority_spread == 0.5
    assert params.seed == 42
    assert params.check_invariant == 1


@pytest.mark.parametrize("line", [
    "colour = blue",
    "order = sideways",
    "check_invariant = maybe",
    "n_entries = -1",
    "n_entries = many",
    "no equals sign",
])
def test_read_input_rejects_bad_lines(tmp_path, line):
    with pytest.raises(ValueError):
        read_input(DrainParams(), write_input(tmp_path / "input.txt", [line]))


def test_generate_random_entries_is_seeded():
    params = DrainParams()
    params.n_entries = 20
    params.average_priority = 10.0
    first = generate_random_entries(params, np.random.default_rng(3))
    second = generate_random_entries(params, np.random.default_rng(3))
    assert [e.priority for e in first] == [e.priority for e in second]
    assert [e.id for e in first] == list(range(20))
    assert first[0].label == "e0"


def test_generate_entries_from_csv(tmp_path):
    entries_file = tmp_path / "entries.csv"
    entries_file.write_text("id,priority,label\n0,2.5,alpha\n1,-1,\n")
    entries = generate_entries(str(entries_file))
    assert [(e.id, e.priority, e.label) for e in entries] == [(0, 2.5, "alpha"), (1, -1.0, "")]


def test_generate_entries_missing_file(tmp_path):
    with pytest.raises(RuntimeError, match="not found"):
        generate_entries(str(tmp_path / "absent.csv"))


def test_generate_entries_missing_column(tmp_path):
    entries_file = tmp_path / "entries.csv"
    entries_file.write_text("id,label\n0,alpha\n")
    with pytest.raises(RuntimeError, match="priority"):
        generate_entries(str(entries_file))


def test_generate_entries_non_numeric_priority(tmp_path):
    entries_file = tmp_path / "entries.csv"
    entries_file.write_text("id,priority\n0,abc\n")
    with pytest.raises(RuntimeError, match="Error parsing entries file"):
        generate_entries(str(entries_file))


@pytest.mark.parametrize("content", [
    "id,priority\n0,2\n1,\n2,3\n",
    "id,priority\n0,2\n,5\n",
])
def test_generate_entries_blank_cells(tmp_path, content):
    entries_file = tmp_path / "entries.csv"
    entries_file.write_text(content)
    with pytest.raises(RuntimeError, match="blank id or priority"):
        generate_entries(str(entries_file))


def test_write_output_fallback_message_follows_verbose(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("logger.VERBOSE", False)
    drain.write_output([Entry(0, 1.0, "a")], str(tmp_path / "absent"))
    assert capsys.readouterr().out == ""
    assert (tmp_path / drain.OUTPUT_FILENAME).exists()


@pytest.mark.parametrize("order, reverse", [("min", False), ("max", True)])
def test_drain_entries_orders_by_priority(order, reverse):
    params = DrainParams()
    params.order = order
    params.check_invariant = 1
    entries = [Entry(i, p) for i, p in enumerate([3.0, -1.0, 7.5, 3.0, 0.0])]
    drained = drain_entries(entries, params)
    priorities = [e.priority for e in drained]
    assert priorities == sorted(priorities, reverse=reverse)
    assert sorted(e.id for e in drained) == list(range(5))


def test_main_requires_output_dir(capsys):
    assert main(["drain.py"]) == -1
    assert "please specify the output directory" in capsys.readouterr().err


def test_main_missing_input_file(tmp_path, capsys):
    assert main(["drain.py", str(tmp_path), str(tmp_path / "absent.txt")]) == -1
    assert "cannot open file" in capsys.readouterr().err


def test_main_random_run(tmp_path):
    input_filename = write_input(tmp_path / "input.txt", [
        "order = max",
        "n_entries = 50",
        "average_priority = 100",
        "priority_spread = 20",
        "seed = 1",
        "check_invariant = true",
    ])
    assert main(["drain.py", str(tmp_path), input_filename]) == 0
    rows = read_output(tmp_path)
    assert len(rows) == 50
    assert [int(row["rank"]) for row in rows] == list(range(50))
    priorities = [float(row["priority"]) for row in rows]
    assert priorities == sorted(priorities, reverse=True)


def test_main_file_run(tmp_path):
    entries_file = tmp_path / "entries.csv"
    entries_file.write_text("id,priority,label\n0,4,d\n1,2,b\n2,9,e\n3,11,f\n4,1,a\n")
    input_filename = write_input(tmp_path / "input.txt", [
        "order = min",
        "generate_entries_from_file = true",
        f"entries_filename = {entries_file}",
    ])
    assert main(["drain.py", str(tmp_path), input_filename]) == 0
    assert [row["label"] for row in read_output(tmp_path)] == ["a", "b", "d", "e", "f"]
