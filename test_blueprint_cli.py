"""Tests for blueprint_cli module."""

import logging
import os
import sys
import tempfile

from PIL import Image

from blueprint_cli import build_example_blueprint, main
from geometry import Direction, Vector2
from machines import Belt, Furnace, Inserter


def test_build_example_blueprint():
    """the example should be a seven machine smelting line"""
    blueprint = build_example_blueprint()

    kinds = [type(m) for m in blueprint]
    assert kinds == [Belt, Belt, Inserter, Furnace, Inserter, Belt, Belt]
    assert [m.position for m in blueprint][3] == Vector2(3, 0)
    assert blueprint.machines[3].direction is None
    assert all(
        m.direction == Direction.EAST for i, m in enumerate(blueprint) if i != 3
    )
    assert blueprint.get_size() == Vector2(8, 2)


def test_main_writes_image(monkeypatch):
    """main should render the example to --output-file"""
    with tempfile.NamedTemporaryFile(suffix='.png', delete=False) as f:
        temp_path = f.name

    try:
        monkeypatch.setattr(sys, 'argv', ['blueprint_cli.py', '--output-file', temp_path])

        result = main()

        assert result == 0
        with Image.open(temp_path) as image:
            assert image.size == (800, 200)
    finally:
        if os.path.exists(temp_path):
            os.remove(temp_path)


def test_main_default_output(monkeypatch, tmp_path):
    """main should write test.png by default"""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(sys, 'argv', ['blueprint_cli.py'])

    result = main()

    assert result == 0
    assert (tmp_path / "test.png").exists()


def test_main_cell_size(monkeypatch, tmp_path):
    """main should honor --cell-size"""
    output = tmp_path / "small.png"
    monkeypatch.setattr(sys, 'argv', [
        'blueprint_cli.py', '-f', str(output), '--cell-size', '50'
    ])

    assert main() == 0
    with Image.open(output) as image:
        assert image.size == (400, 100)


def test_main_logs_conversion_and_draws(monkeypatch, tmp_path, caplog):
    """main should log the graph conversion and each drawn machine"""
    caplog.set_level(logging.INFO, logger="blueprinter")
    monkeypatch.setattr(sys, 'argv', ['blueprint_cli.py', '-f', str(tmp_path / "out.png")])

    assert main() == 0

    assert any(m.startswith("Graph machine GraphFurnace") for m in caplog.messages)
    drawn = [m for m in caplog.messages if m.startswith("Drawing machine:")]
    assert len(drawn) == 7


def test_main_recipe_graph(monkeypatch, tmp_path):
    """main should write the recipe graph when asked"""
    graph_path = tmp_path / "recipes.gv"
    monkeypatch.setattr(sys, 'argv', [
        'blueprint_cli.py',
        '-f', str(tmp_path / "out.png"),
        '--recipe-graph', str(graph_path),
    ])

    assert main() == 0

    content = graph_path.read_text(encoding="utf-8")
    assert "digraph" in content
    assert "iron-plate" in content


def test_main_bad_font(monkeypatch, tmp_path, capsys):
    """main should fail cleanly when the font cannot be loaded"""
    monkeypatch.setattr(sys, 'argv', [
        'blueprint_cli.py',
        '-f', str(tmp_path / "out.png"),
        '--font', str(tmp_path / "missing.ttf"),
    ])

    result = main()

    assert result == 1
    captured = capsys.readouterr()
    assert 'Cannot load font' in captured.err
    assert not (tmp_path / "out.png").exists()


def test_main_unwritable_output(monkeypatch, tmp_path, capsys):
    """main should report a failed save"""
    monkeypatch.setattr(sys, 'argv', [
        'blueprint_cli.py', '-f', str(tmp_path / "missing_dir" / "out.png")
    ])

    result = main()

    assert result == 1
    assert 'Error:' in capsys.readouterr().err


def test_main_invalid_cell_size(monkeypatch, capsys):
    """main should reject non-positive cell sizes"""
    monkeypatch.setattr(sys, 'argv', ['blueprint_cli.py', '--cell-size', '0'])

    result = main()

    assert result == 1
    assert 'Invalid cell size' in capsys.readouterr().err
