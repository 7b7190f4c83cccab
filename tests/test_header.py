"""
Tests for header decoding and version gating
"""
from dataclasses import fields, replace

import pytest

from wld_analyzer.errors import HeaderDecodeError
from wld_analyzer.parser import WorldHeader, decode_header
from wld_analyzer.reader import ByteCursor

from world_builder import LATEST_VERSION, build_header


def decode(version, **kwargs):
    data = build_header(version, **kwargs)
    cursor = ByteCursor(data)
    header = decode_header(cursor, version)
    return header, cursor, data


def gate_of(name):
    return next(f.metadata for f in fields(WorldHeader) if f.name == name)


class TestHeaderFields:
    """Ungated fields and arrays"""

    def test_consumes_whole_section(self):
        for version in (194, 225, 240, 257, 268, 269, LATEST_VERSION):
            header, cursor, data = decode(version)
            assert cursor.offset == len(data), version

    def test_basic_fields(self):
        header, _, _ = decode(LATEST_VERSION, width=4200, height=1200, name='Shire',
                              world_surface=355.7, rock_layer=480.2)
        assert header.map_name == 'Shire'
        assert header.seed_text == '12345'
        assert header.max_tiles_x == 4200
        assert header.max_tiles_y == 1200
        assert header.world_surface == 355.7
        assert header.surface_row == 355
        assert header.rock_layer_row == 480
        assert header.world_id == 42
        assert header.moon_type == 3
        assert header.tree_style == (0, 1, 2, 3)
        assert header.background_styles == tuple(range(8))
        assert header.ore_tier2 == 9
        assert header.num_clouds == 10

    def test_guid(self):
        header, _, _ = decode(LATEST_VERSION, guid=bytes.fromhex('33221100554477668899aabbccddeeff'))
        assert header.guid_string == '00112233-4455-6677-8899-aabbccddeeff'

    def test_count_prefixed_arrays(self):
        header, cursor, data = decode(
            LATEST_VERSION,
            angler_finished=['Andrew', 'Beth'],
            kill_count=[5, 0, 12],
            celebrating_npcs=[22],
            tree_tops=[1, 2, 3, 4],
        )
        assert header.angler_who_finished_today == ('Andrew', 'Beth')
        assert header.kill_count == (5, 0, 12)
        assert header.temp_party_celebrating_npcs == (22,)
        assert header.tree_tops_variations == (1, 2, 3, 4)
        assert cursor.offset == len(data)

    def test_to_dict_omits_absent_fields(self):
        header, _, _ = decode(200)
        result = header.to_dict()
        assert result['map_name'] == 'Test World'
        assert 'game_mode' not in result
        assert result['expert_mode'] is True
        assert result['guid'] == bytes(range(16)).hex()
        assert result['tree_x'] == [1, 2, 3]


class TestVersionGating:
    """Fields that only exist in some versions"""

    @pytest.mark.parametrize('name,gate', [
        ('get_good_world', 227),
        ('tenth_anniversary_world', 238),
        ('downed_deerclops', 240),
        ('not_the_bees_world', 241),
        ('after_party_of_doom', 257),
        ('zenith_world', 267),
        ('moondial_cooldown', 269),
    ])
    def test_field_appears_at_gate(self, name, gate):
        assert gate_of(name) == {'since': gate}
        below, _, _ = decode(gate - 1)
        at, _, _ = decode(gate)
        assert getattr(below, name) is None
        assert getattr(at, name) is not None

    def test_gated_zero_is_not_absent(self):
        header, _, _ = decode(269)
        assert header.moondial_cooldown == 0
        assert header.downed_deerclops is False

    def test_expert_mode_before_game_mode(self):
        header, _, _ = decode(224, expert_mode=True)
        assert header.expert_mode is True
        assert header.game_mode is None
        assert header.drunk_world is None
        assert header.saved_golfer is None
        assert header.extra_background_styles is None

    def test_game_mode_replaces_expert_mode(self):
        header, _, _ = decode(225, game_mode=2)
        assert header.game_mode == 2
        assert header.drunk_world is False
        assert header.expert_mode is None
        assert header.get_good_world is None
        assert header.extra_background_styles == (0, 0, 0, 0, 0)

    def test_every_gated_field_matches_version(self):
        for version in (194, 226, 250, LATEST_VERSION):
            header, _, _ = decode(version)
            for f in fields(WorldHeader):
                if f.metadata:
                    expected = WorldHeader.field_present(version, f.metadata)
                    assert (getattr(header, f.name) is not None) == expected, (version, f.name)


class TestValidation:
    """Single-pass presence check"""

    def test_rejects_gated_field_in_old_version(self):
        header, _, _ = decode(230)
        with pytest.raises(HeaderDecodeError):
            replace(header, zenith_world=True).validate()

    def test_rejects_missing_gated_field(self):
        header, _, _ = decode(LATEST_VERSION)
        with pytest.raises(HeaderDecodeError):
            replace(header, moondial_cooldown=None).validate()

    def test_rejects_both_difficulty_shapes(self):
        header, _, _ = decode(LATEST_VERSION)
        with pytest.raises(HeaderDecodeError):
            replace(header, expert_mode=False).validate()


class TestFailures:
    """Truncated header sections"""

    @pytest.mark.parametrize('cut', [0, 5, 60, 200])
    def test_truncated(self, cut):
        data = build_header(LATEST_VERSION)[:cut]
        with pytest.raises(HeaderDecodeError):
            decode_header(ByteCursor(data), LATEST_VERSION)

    def test_truncated_by_one_byte(self):
        data = build_header(LATEST_VERSION)
        with pytest.raises(HeaderDecodeError):
            decode_header(ByteCursor(data[:-1]), LATEST_VERSION)
