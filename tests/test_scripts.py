import runpy
from pathlib import Path

import pytest

from subset_sampling.builder import SubsetDrawBuilder
from subset_sampling.config import DrawConfig

SCRIPTS_DIR = Path(__file__).parent.parent / "scripts"


def _main(script_name):
    return runpy.run_path(str(SCRIPTS_DIR / script_name), run_name="scripts")["main"]


def test_sample_subsets_writes_to_configured_output(tmp_path, capsys):
    config = tmp_path / "config.yaml"
    config.write_text(
        f"paths:\n"
        f"  output: {tmp_path / 'out'}\n"
        f"draws:\n"
        f"  n_draws: 3\n"
        f"  show_progress: false\n"
    )

    _main("sample_subsets.py")([
        "--weights", "10", "20", "30", "40", "50",
        "--target", "80",
        "--config", str(config),
        "--quiet",
    ])

    output = tmp_path / "out" / "draws.jsonl"
    assert output.exists()
    assert len(output.read_text().splitlines()) == 3
    assert capsys.readouterr().out == ""


def test_sample_subsets_prints_without_output(capsys):
    _main("sample_subsets.py")([
        "--weights", "5", "--target", "5", "--n_draws", "2", "--quiet",
    ])

    assert capsys.readouterr().out.splitlines() == ["0", "0"]


def test_check_uniformity_rejects_draws_from_other_instance(tmp_path):
    builder = SubsetDrawBuilder(draw_config=DrawConfig(n_draws=10, seed=1), verbose=False)
    draws = builder.draw([1, 2, 3, 4, 5], 5)
    path = builder.save_jsonl(draws, "draws.jsonl", output_dir=tmp_path)

    with pytest.raises(SystemExit) as excinfo:
        _main("check_uniformity.py")([
            "--weights", "10", "20", "30", "40", "50",
            "--target", "80",
            "--draws", str(path),
        ])
    assert excinfo.value.code == 2


def test_check_uniformity_accepts_matching_draws(tmp_path):
    weights = [10, 20, 30, 40, 50]
    builder = SubsetDrawBuilder(draw_config=DrawConfig(n_draws=3000, seed=17), verbose=False)
    path = builder.save_jsonl(builder.draw(weights, 80), "draws.jsonl", output_dir=tmp_path)

    _main("check_uniformity.py")([
        "--weights", "10", "20", "30", "40", "50",
        "--target", "80",
        "--draws", str(path),
    ])
