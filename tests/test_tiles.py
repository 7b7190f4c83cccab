"""
Tests for tile record decoding and run-length expansion
"""
import struct

import pytest

from wld_analyzer.errors import TileDecodeError
from wld_analyzer.parser import LiquidKind, SlopeShape, Tile, decode_tile, decode_tiles
from wld_analyzer.parser.preamble import WorldPreamble
from wld_analyzer.parser.tiles import read_flag_chain
from wld_analyzer.reader import ByteCursor

from world_builder import encode_tile

NO_IMPORTANTS = ()


def important(*ids):
    flags = [False] * 700
    for i in ids:
        flags[i] = True
    return tuple(flags)


def one(data, importants=NO_IMPORTANTS):
    cursor = ByteCursor(data)
    tile, run = decode_tile(cursor, importants)
    assert cursor.offset == len(data)
    return tile, run


def preamble(width, height, importants=NO_IMPORTANTS):
    return WorldPreamble(version=279, pointers=(0, 0, 0), importants=importants,
                         width=width, height=height)


class TestFlagChain:
    """Variable-length flag bytes"""

    @pytest.mark.parametrize('flags1', range(0x01, 0x100, 2))
    def test_bit0_reads_exactly_one_more_flag_byte(self, flags1):
        cursor = ByteCursor(bytes([flags1, 0x00, 0xEE, 0xEE]))
        flags = read_flag_chain(cursor)
        assert flags == (flags1, 0, None, None)
        assert cursor.offset == 2

    @pytest.mark.parametrize('flags1', range(0x00, 0x100, 2))
    def test_bit0_clear_reads_no_more_flag_bytes(self, flags1):
        cursor = ByteCursor(bytes([flags1, 0xFF, 0xFF, 0xFF]))
        assert read_flag_chain(cursor) == (flags1, None, None, None)
        assert cursor.offset == 1

    def test_no_extension_reads_single_byte(self):
        cursor = ByteCursor(b'\x00\xEE')
        tile, run = decode_tile(cursor, NO_IMPORTANTS)
        assert cursor.offset == 1
        assert tile == Tile()
        assert run == 0

    def test_full_chain(self):
        data = bytes([0x01, 0x01, 0x01, 0x02])
        tile, _ = one(data)
        assert tile.invisible_block is True

    def test_chain_stops_when_bit0_clear(self):
        cursor = ByteCursor(bytes([0x01, 0x01, 0x00, 0xFF]))
        decode_tile(cursor, NO_IMPORTANTS)
        assert cursor.offset == 3


class TestBlocks:
    """Block payloads"""

    def test_narrow_block_id(self):
        tile, _ = one(encode_tile(block_id=30))
        assert tile.block_id == 30
        assert tile.frame_x is None and tile.frame_y is None

    def test_wide_block_id(self):
        tile, _ = one(encode_tile(block_id=470))
        assert tile.block_id == 470

    def test_important_block_reads_frames(self):
        tile, _ = one(encode_tile(block_id=5, frame=(18, -36)), important(5))
        assert (tile.frame_x, tile.frame_y) == (18, -36)

    def test_frame_y_reset_quirk(self):
        tile, _ = one(encode_tile(block_id=144, frame=(36, 54)), important(144))
        assert tile.frame_x == 36
        assert tile.frame_y == 0

    def test_block_color(self):
        tile, _ = one(encode_tile(block_id=1, block_color=13))
        assert tile.block_color == 13

    def test_unimportant_block_has_no_frames_even_if_listed_elsewhere(self):
        tile, _ = one(encode_tile(block_id=6), important(5))
        assert tile.frame_x is None

    def test_block_beyond_importance_table_has_no_frames(self):
        tile, _ = one(encode_tile(block_id=900), (True, True))
        assert tile.block_id == 900
        assert tile.frame_x is None
        assert tile.frame_y is None


class TestWallsAndLiquids:
    """Wall and liquid payloads"""

    def test_wall_with_color(self):
        tile, _ = one(encode_tile(wall_id=4, wall_color=2))
        assert tile.wall_id == 4
        assert tile.wall_color == 2

    def test_wall_high_byte(self):
        tile, _ = one(encode_tile(wall_id=0x34, wall_high=0x01))
        assert tile.wall_id == 0x134

    def test_wall_high_byte_without_low_byte(self):
        tile, _ = one(encode_tile(wall_high=0x01))
        assert tile.wall_id == 0x100

    @pytest.mark.parametrize('code,kind', [
        (1, LiquidKind.WATER),
        (2, LiquidKind.LAVA),
        (3, LiquidKind.HONEY),
    ])
    def test_liquid_kinds(self, code, kind):
        tile, _ = one(encode_tile(liquid=code, liquid_amount=128))
        assert tile.liquid_kind is kind
        assert tile.liquid_amount == 128

    @pytest.mark.parametrize('code', [1, 2, 3])
    def test_shimmer_override(self, code):
        tile, _ = one(encode_tile(liquid=code, shimmer=True))
        assert tile.liquid_kind is LiquidKind.SHIMMER

    def test_no_liquid(self):
        tile, _ = one(encode_tile(block_id=1))
        assert tile.liquid_kind is None
        assert tile.liquid_amount is None


class TestExtras:
    """Wires, slopes, actuators and visibility"""

    def test_wires(self):
        tile, _ = one(encode_tile(red=True, green=True, yellow=True))
        assert tile.wire_red is True
        assert tile.wire_blue is None
        assert tile.wire_green is True
        assert tile.wire_yellow is True

    @pytest.mark.parametrize('code,shape', [
        (1, SlopeShape.HALF),
        (2, SlopeShape.TOP_RIGHT),
        (3, SlopeShape.TOP_LEFT),
        (4, SlopeShape.BOTTOM_RIGHT),
        (5, SlopeShape.BOTTOM_LEFT),
    ])
    def test_slopes(self, code, shape):
        tile, _ = one(encode_tile(block_id=1, slope=code))
        assert tile.slope is shape

    def test_actuator(self):
        tile, _ = one(encode_tile(block_id=1, actuator=True, actuated=True))
        assert tile.actuator is True
        assert tile.actuated is True

    def test_visibility_flags(self):
        tile, _ = one(encode_tile(block_id=1, wall_id=1, invisible_wall=True,
                                  full_bright_block=True, full_bright_wall=True))
        assert tile.invisible_block is None
        assert tile.invisible_wall is True
        assert tile.full_bright_block is True
        assert tile.full_bright_wall is True

    def test_everything_in_stream_order(self):
        data = encode_tile(block_id=300, frame=(1, 2), block_color=3, wall_id=4,
                           wall_color=5, wall_high=2, liquid=2, liquid_amount=6,
                           shimmer=True, blue=True, slope=3, run=7)
        tile, run = one(data, important(300))
        assert tile == Tile(
            block_id=300, frame_x=1, frame_y=2, block_color=3,
            wall_id=0x204, wall_color=5, liquid_amount=6,
            liquid_kind=LiquidKind.SHIMMER, wire_blue=True,
            slope=SlopeShape.TOP_LEFT,
        )
        assert run == 7


class TestRunLength:
    """Run counts and grid fill"""

    def test_byte_run(self):
        assert one(encode_tile(block_id=1, run=200))[1] == 200

    def test_short_run(self):
        assert one(encode_tile(block_id=1, run=1000))[1] == 1000

    def test_negative_short_run_is_no_run(self):
        data = bytes([0x80]) + struct.pack('<h', -3)
        _, run = one(data)
        assert run == -3
        grid = decode_tiles(ByteCursor(data + b'\x00'), preamble(1, 2))
        assert grid.record_count == 2

    def test_run_expansion_is_column_local(self):
        data = (encode_tile(block_id=1, run=2) + encode_tile(wall_id=3)
                + encode_tile(liquid=1, run=3))
        grid = decode_tiles(ByteCursor(data), preamble(2, 4))
        assert [t.block_id for t in grid.column(0)[:3]] == [1, 1, 1]
        assert grid[0, 3].wall_id == 3
        assert all(t.liquid_kind is LiquidKind.WATER for t in grid.column(1))
        assert grid.record_count == 3
        assert grid.run_total == 5
        assert grid.record_count == grid.tile_count - grid.run_total

    def test_run_copies_equal_record(self):
        record = dict(block_id=5, frame=(2, 4), wall_id=9, red=True, run=3)
        grid = decode_tiles(ByteCursor(encode_tile(**record)), preamble(1, 4, important(5)))
        first = grid[0, 0]
        for y in range(1, 4):
            assert grid[0, y] == first

    def test_run_past_column_end_is_truncated(self):
        data = encode_tile(block_id=1, run=10) + encode_tile(block_id=2, run=2)
        grid = decode_tiles(ByteCursor(data), preamble(2, 3))
        assert len(grid.column(0)) == 3
        assert grid[1, 0].block_id == 2
        assert grid[1, 2].block_id == 2
        assert grid.run_total == 2 + 2

    def test_runs_group_shared_cells(self):
        data = (encode_tile(block_id=1, run=2) + encode_tile(wall_id=3)
                + encode_tile(wall_id=3))
        grid = decode_tiles(ByteCursor(data), preamble(1, 5))
        runs = [(start, length, tile.block_id, tile.wall_id)
                for start, length, tile in grid.runs(0)]
        # equal but separately decoded records stay separate runs
        assert runs == [(0, 3, 1, None), (3, 1, None, 3), (4, 1, None, 3)]

    def test_out_of_range_index(self):
        grid = decode_tiles(ByteCursor(encode_tile(run=1)), preamble(1, 2))
        with pytest.raises(IndexError):
            grid[1, 0]
        with pytest.raises(IndexError):
            grid[0, 2]


class TestFailures:
    """Truncated tile sections"""

    def test_truncated_grid(self):
        data = encode_tile(block_id=1) * 3
        with pytest.raises(TileDecodeError):
            decode_tiles(ByteCursor(data), preamble(2, 2))

    def test_truncated_record(self):
        data = encode_tile(block_id=470)[:-1]
        with pytest.raises(TileDecodeError):
            decode_tiles(ByteCursor(data), preamble(1, 1))
