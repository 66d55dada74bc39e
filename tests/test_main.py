"""Tests for the command line entry point."""

import json

import cv2
import numpy as np
import pytest

from edgelink.config import Config
from edgelink.linking.scanner import link_edges
from edgelink.main import main, load_edge_image, save_outputs


@pytest.fixture
def edge_image_path(tmp_path):
    image = np.zeros((20, 30), dtype=np.uint8)
    image[5, 3:25] = 255
    image[12:18, 10] = 255
    image[2, 28] = 255
    path = tmp_path / "edges.png"
    cv2.imwrite(str(path), image)
    return path


def run(args, tmp_path):
    return main(args + ["--config", str(tmp_path / "none.yaml"), "--output-dir", str(tmp_path / "out")])


def test_main_writes_outputs(edge_image_path, tmp_path, capsys):
    assert run([str(edge_image_path), "--min-length", "3"], tmp_path) == 0

    out_dir = tmp_path / "out"
    chains_files = list(out_dir.glob("edges_*_chains.json"))
    assert len(chains_files) == 1
    assert len(list(out_dir.glob("edges_*_labels.png"))) == 1
    assert len(list(out_dir.glob("edges_*_chains.png"))) == 1

    data = json.loads(chains_files[0].read_text())
    assert data["shape"] == [20, 30]
    assert sorted(len(c["points"]) for c in data["chains"]) == [6, 22]

    assert "Linked 2 chains, 28 points" in capsys.readouterr().out


def test_main_missing_image(tmp_path):
    assert run([str(tmp_path / "nope.png")], tmp_path) == 1


def test_main_invalid_min_length(edge_image_path, tmp_path):
    assert run([str(edge_image_path), "--min-length", "0"], tmp_path) == 1
    assert not (tmp_path / "out").exists()


def test_main_non_string_log_level_reported(edge_image_path, tmp_path):
    config_path = tmp_path / "settings.yaml"
    config_path.write_text("system:\n  log_level: 10\n")

    result = main([str(edge_image_path), "--config", str(config_path),
                   "--output-dir", str(tmp_path / "out")])

    assert result == 1
    assert not (tmp_path / "out").exists()


def test_load_edge_image_keeps_faint_16_bit_edges(tmp_path):
    image = np.zeros((10, 10), dtype=np.uint16)
    image[4, 2:8] = 1
    path = tmp_path / "faint.png"
    cv2.imwrite(str(path), image)

    mask = load_edge_image(str(path))

    assert mask.shape == (10, 10)
    assert np.count_nonzero(mask) == 6
    assert mask[4, 2] != 0


def test_load_edge_image_colour(tmp_path):
    image = np.zeros((8, 8, 3), dtype=np.uint8)
    image[2, 1:6] = (0, 0, 1)
    path = tmp_path / "colour.png"
    cv2.imwrite(str(path), image)

    mask = load_edge_image(str(path))

    assert mask.shape == (8, 8)
    assert np.count_nonzero(mask) == 5


def test_save_outputs_reports_failed_write(monkeypatch, tmp_path):
    registry = link_edges(np.ones((1, 4)), min_length=1, thin=False)
    config = Config()
    config.output.save_labels = False
    config.output.save_chains = False
    monkeypatch.setattr(cv2, "imwrite", lambda *args, **kwargs: False)

    with pytest.raises(IOError):
        save_outputs(registry, np.ones((1, 4)), config, tmp_path, "edges")
