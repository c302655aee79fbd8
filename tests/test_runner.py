from square_maze.__main__ import main
from square_maze.runner import MazeConfig, build_and_solve


def test_build_and_solve_collects_stats():
    result = build_and_solve(MazeConfig(width=6, height=5, start_x=2, seed=11, verbose=False))
    assert result.stats.cells == 30
    assert result.stats.removed_walls == 29
    assert result.stats.path_length == result.solution.length
    assert result.stats.exit == result.solution.exit


def test_config_reads_seed_from_environment(monkeypatch):
    monkeypatch.setenv("MAZE_SEED", "77")
    assert MazeConfig().seed == 77
    assert MazeConfig(seed=3).seed == 3


def test_seeded_runs_are_identical():
    first = build_and_solve(MazeConfig(width=8, height=8, seed=5, verbose=False))
    second = build_and_solve(MazeConfig(width=8, height=8, seed=5, verbose=False))
    assert first.solution.path == second.solution.path
    assert (first.maze.grid.walls == second.maze.grid.walls).all()


def test_cli_prints_maze(capsys):
    assert main(["4", "3", "--seed", "1", "--quiet"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 7
    assert lines[0].startswith("+  +")


def test_cli_verbose_reports_steps(capsys):
    assert main(["3", "3", "--seed", "1", "--no-solution"]) == 0
    output = capsys.readouterr().out
    assert "1. Generating a 3x3 maze" in output
    assert "**" not in output


def test_cli_reports_bad_dimensions(capsys):
    assert main(["0", "3", "--quiet"]) == 2
    assert capsys.readouterr().out.startswith("ERROR:")


def test_cli_reports_negative_seed(capsys):
    assert main(["3", "3", "--seed", "-1", "--quiet"]) == 2
    assert capsys.readouterr().out.startswith("ERROR:")


def test_cli_reports_unparsable_seed_from_environment(monkeypatch, capsys):
    monkeypatch.setenv("MAZE_SEED", "abc")
    assert main(["3", "3", "--quiet"]) == 2
    assert capsys.readouterr().out.startswith("ERROR:")
