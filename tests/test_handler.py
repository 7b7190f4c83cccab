"""
Tests for the conversion handler and the command line front end
"""
import io
import json
import logging

import pytest
from PIL import Image

from wld_analyzer.handler import (
    SUPPORTED_FORMATS,
    convert_files,
    convert_world,
    output_name,
    target_format,
)
from wld_analyzer.main import main

from world_builder import build_preamble, empty_world


class TestConvertWorld:
    """Single world conversion"""

    def test_png_output(self):
        result = convert_world('Forest.wld', empty_world(4, 3))
        assert result.name == 'Forest.png'
        image = Image.open(io.BytesIO(result.data))
        assert image.size == (4, 3)

    def test_progress_forwarded(self):
        seen = []
        convert_world('a.wld', empty_world(10, 10), progress_callback=seen.append)
        assert seen and seen[-1] == 100

    def test_unsupported_target(self):
        with pytest.raises(ValueError):
            convert_world('a.wld', empty_world(), 'wld')

    def test_formats(self):
        assert target_format('PNG').mime == 'image/png'
        assert [f.format for f in SUPPORTED_FORMATS if f.source] == ['wld']

    @pytest.mark.parametrize('name,expected', [
        ('world.wld', 'world.png'),
        ('WORLD.WLD', 'WORLD.png'),
        ('backup.wld.bak', 'backup.wld.bak.png'),
    ])
    def test_output_name(self, name, expected):
        assert output_name(name, 'png') == expected


class TestConvertFiles:
    """Batch conversion"""

    def test_failure_does_not_stop_batch(self, caplog):
        files = [
            ('good.wld', empty_world(2, 2)),
            ('bad.wld', build_preamble(file_type=9)),
            ('old.wld', build_preamble(version=120)),
            ('also_good.wld', empty_world(3, 3)),
        ]
        with caplog.at_level(logging.ERROR):
            report = convert_files(files)
        assert [f.name for f in report.files] == ['good.png', 'also_good.png']
        assert [name for name, _ in report.errors] == ['bad.wld', 'old.wld']
        assert not report.ok
        assert 'bad.wld' in caplog.text

    @pytest.mark.parametrize('bad', [
        build_preamble(pointers=(-5, -5)),
        empty_world(2, -1),
        empty_world(-2, 2),
    ])
    def test_corrupt_preamble_does_not_stop_batch(self, bad):
        report = convert_files([('bad.wld', bad), ('good.wld', empty_world(2, 2))])
        assert [f.name for f in report.files] == ['good.png']
        assert [name for name, _ in report.errors] == ['bad.wld']

    def test_empty_batch(self):
        report = convert_files([])
        assert report.ok
        assert report.files == []


class TestMain:
    """render-wld command"""

    def test_directory(self, tmp_path):
        worlds = tmp_path / 'worlds'
        worlds.mkdir()
        (worlds / 'one.wld').write_bytes(empty_world(2, 2))
        (worlds / 'two.wld').write_bytes(empty_world(5, 4))
        (worlds / 'notes.txt').write_text('ignored')
        out = tmp_path / 'out'

        assert main([str(worlds), '--output', str(out), '--dump-header']) == 0
        assert Image.open(out / 'two.png').size == (5, 4)
        header = json.loads((out / 'one_header.json').read_text())
        assert header['max_tiles_x'] == 2
        assert not (out / 'notes.png').exists()

    def test_raw_format(self, tmp_path):
        world = tmp_path / 'w.wld'
        world.write_bytes(empty_world(3, 2))
        assert main([str(world), '--output', str(tmp_path), '--format', 'rgba']) == 0
        assert len((tmp_path / 'w.rgba').read_bytes()) == 3 * 2 * 4

    def test_header_only(self, tmp_path):
        world = tmp_path / 'w.wld'
        world.write_bytes(empty_world(3, 2))
        out = tmp_path / 'out'
        assert main([str(world), '--output', str(out),
                     '--sections', 'header', '--dump-header']) == 0
        assert (out / 'w_header.json').exists()
        assert not (out / 'w.png').exists()

    def test_failure_exit_code(self, tmp_path):
        world = tmp_path / 'broken.wld'
        world.write_bytes(b'nope')
        assert main([str(world), '--output', str(tmp_path / 'out')]) == 1

    def test_missing_path(self, tmp_path):
        assert main([str(tmp_path / 'missing.wld')]) == 1

    def test_log_file(self, tmp_path):
        world = tmp_path / 'w.wld'
        world.write_bytes(empty_world())
        logs = tmp_path / 'logs'
        assert main([str(world), '--output', str(tmp_path), '--log-dir', str(logs)]) == 0
        assert list(logs.glob('wld_analyzer_*.log'))
