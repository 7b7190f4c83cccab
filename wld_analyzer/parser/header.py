"""World header section decoder.

The header is one strictly ordered run of fields. Some fields only exist from
a given world version on; those are declared with ``since(...)`` below and are
``None`` whenever the file predates them.
"""
from dataclasses import dataclass, field, fields
from typing import Any, Dict, Optional, Tuple
import logging
import math

from ..errors import CursorBoundsError, HeaderDecodeError
from ..reader import ByteCursor, parse_guid

logger = logging.getLogger(__name__)

# Version that replaced the expert mode flag with the game mode block.
GAME_MODE_VERSION = 225


def since(version: int):
    """Field present only in worlds of `version` or newer."""
    return field(default=None, metadata={'since': version})


def until(version: int):
    """Field present only in worlds older than `version`."""
    return field(default=None, metadata={'until': version})


@dataclass(frozen=True)
class WorldHeader:
    """Decoded world metadata."""
    version: int
    map_name: str
    seed_text: str
    world_generator_version: bytes
    guid: bytes
    guid_string: str
    world_id: int
    left_world: int
    right_world: int
    top_world: int
    bottom_world: int
    max_tiles_y: int
    max_tiles_x: int
    creation_time: bytes
    moon_type: int
    tree_x: Tuple[int, ...]
    tree_style: Tuple[int, ...]
    cave_back_x: Tuple[int, ...]
    cave_back_style: Tuple[int, ...]
    ice_back_style: int
    jungle_back_style: int
    hell_back_style: int
    spawn_tile_x: int
    spawn_tile_y: int
    world_surface: float
    rock_layer: float
    temp_time: float
    temp_day_time: bool
    temp_moon_phase: int
    temp_blood_moon: bool
    temp_eclipse: bool
    dungeon_x: int
    dungeon_y: int
    crimson: bool
    downed_boss1: bool
    downed_boss2: bool
    downed_boss3: bool
    downed_queen_bee: bool
    downed_mech_boss1: bool
    downed_mech_boss2: bool
    downed_mech_boss3: bool
    downed_mech_boss_any: bool
    downed_plant_boss: bool
    downed_golem_boss: bool
    downed_slime_king: bool
    saved_goblin: bool
    saved_wizard: bool
    saved_mech: bool
    downed_goblins: bool
    downed_clown: bool
    downed_frost: bool
    downed_pirates: bool
    shadow_orb_smashed: bool
    spawn_meteor: bool
    shadow_orb_count: int
    altar_count: int
    hard_mode: bool
    invasion_delay: int
    invasion_size: int
    invasion_type: int
    invasion_x: float
    slime_rain_time: float
    sundial_cooldown: int
    temp_raining: bool
    temp_rain_time: int
    temp_max_rain: float
    ore_tier1: int
    ore_tier2: int
    ore_tier3: int
    background_styles: Tuple[int, ...]
    cloud_bg_active: int
    num_clouds: int
    wind_speed: float
    angler_who_finished_today: Tuple[str, ...]
    saved_angler: bool
    angler_quest: int
    saved_stylist: bool
    saved_tax_collector: bool
    invasion_size_start: int
    temp_cultist_delay: int
    kill_count: Tuple[int, ...]
    fast_forward_time_to_dawn: bool
    downed_fishron: bool
    downed_martians: bool
    downed_ancient_cultist: bool
    downed_moonlord: bool
    downed_halloween_king: bool
    downed_halloween_tree: bool
    downed_christmas_ice_queen: bool
    downed_christmas_santank: bool
    downed_christmas_tree: bool
    downed_tower_solar: bool
    downed_tower_vortex: bool
    downed_tower_nebula: bool
    downed_tower_stardust: bool
    tower_active_solar: bool
    tower_active_vortex: bool
    tower_active_nebula: bool
    tower_active_stardust: bool
    lunar_apocalypse_is_up: bool
    temp_party_manual: bool
    temp_party_genuine: bool
    temp_party_cooldown: int
    temp_party_celebrating_npcs: Tuple[int, ...]
    sandstorm_happening: bool
    sandstorm_time_left: int
    sandstorm_severity: float
    sandstorm_intended_severity: float
    saved_bartender: bool
    dd2_downed_invasion_t1: bool
    dd2_downed_invasion_t2: bool
    dd2_downed_invasion_t3: bool

    # Legacy difficulty flag, replaced by game_mode
    expert_mode: Optional[bool] = until(GAME_MODE_VERSION)

    game_mode: Optional[int] = since(225)
    drunk_world: Optional[bool] = since(225)
    get_good_world: Optional[bool] = since(227)
    tenth_anniversary_world: Optional[bool] = since(238)
    dont_starve_world: Optional[bool] = since(239)
    not_the_bees_world: Optional[bool] = since(241)
    remix_world: Optional[bool] = since(249)
    no_traps_world: Optional[bool] = since(266)
    zenith_world: Optional[bool] = since(267)

    after_party_of_doom: Optional[bool] = since(257)
    saved_golfer: Optional[bool] = since(225)

    extra_background_styles: Optional[Tuple[int, ...]] = since(225)
    combat_book_was_used: Optional[bool] = since(225)
    lantern_night_cooldown: Optional[int] = since(225)
    lantern_night_genuine: Optional[bool] = since(225)
    lantern_night_manual: Optional[bool] = since(225)
    lantern_night_next_night_is_genuine: Optional[bool] = since(225)
    tree_tops_variations: Optional[Tuple[int, ...]] = since(225)
    force_halloween_for_today: Optional[bool] = since(225)
    force_xmas_for_today: Optional[bool] = since(225)
    saved_ore_tier_copper: Optional[int] = since(225)
    saved_ore_tier_iron: Optional[int] = since(225)
    saved_ore_tier_silver: Optional[int] = since(225)
    saved_ore_tier_gold: Optional[int] = since(225)
    bought_cat: Optional[bool] = since(225)
    bought_dog: Optional[bool] = since(225)
    bought_bunny: Optional[bool] = since(225)
    downed_empress_of_light: Optional[bool] = since(225)
    downed_queen_slime: Optional[bool] = since(225)

    downed_deerclops: Optional[bool] = since(240)

    unlocked_slime_blue_spawn: Optional[bool] = since(269)
    unlocked_merchant_spawn: Optional[bool] = since(269)
    unlocked_demolitionist_spawn: Optional[bool] = since(269)
    unlocked_party_girl_spawn: Optional[bool] = since(269)
    unlocked_dye_trader_spawn: Optional[bool] = since(269)
    unlocked_truffle_spawn: Optional[bool] = since(269)
    unlocked_arms_dealer_spawn: Optional[bool] = since(269)
    unlocked_nurse_spawn: Optional[bool] = since(269)
    unlocked_princess_spawn: Optional[bool] = since(269)
    combat_book_volume_two_was_used: Optional[bool] = since(269)
    peddlers_satchel_was_used: Optional[bool] = since(269)
    unlocked_slime_green_spawn: Optional[bool] = since(269)
    unlocked_slime_old_spawn: Optional[bool] = since(269)
    unlocked_slime_purple_spawn: Optional[bool] = since(269)
    unlocked_slime_rainbow_spawn: Optional[bool] = since(269)
    unlocked_slime_red_spawn: Optional[bool] = since(269)
    unlocked_slime_yellow_spawn: Optional[bool] = since(269)
    unlocked_slime_copper_spawn: Optional[bool] = since(269)
    fast_forward_time_to_dusk: Optional[bool] = since(269)
    moondial_cooldown: Optional[int] = since(269)

    @property
    def surface_row(self) -> int:
        return math.floor(self.world_surface)

    @property
    def rock_layer_row(self) -> int:
        return math.floor(self.rock_layer)

    @staticmethod
    def field_present(version: int, metadata: Dict[str, Any]) -> bool:
        """Whether a field with the given gate metadata exists in `version`."""
        if 'since' in metadata and version < metadata['since']:
            return False
        if 'until' in metadata and version >= metadata['until']:
            return False
        return True

    def validate(self) -> None:
        """Check that exactly the fields of this version are present.

        Raises:
            HeaderDecodeError: A gated field is set or missing against its gate
        """
        for f in fields(self):
            value = getattr(self, f.name)
            expected = self.field_present(self.version, f.metadata)
            if expected and value is None:
                raise HeaderDecodeError(
                    f"Field {f.name} missing from version {self.version} header"
                )
            if not expected and value is not None:
                raise HeaderDecodeError(
                    f"Field {f.name} does not exist in version {self.version} headers"
                )
        if self.expert_mode is not None and self.game_mode is not None:
            raise HeaderDecodeError("Header has both expert_mode and game_mode")

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly view; absent fields are omitted."""
        result = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            if isinstance(value, bytes):
                value = value.hex()
            elif isinstance(value, tuple):
                value = list(value)
            result[f.name] = value
        return result


class HeaderDecoder:
    """Single linear pass over the header section."""

    def __init__(self, cursor: ByteCursor, version: int):
        self.cursor = cursor
        self.version = version
        self.values: Dict[str, Any] = {'version': version}

    def _read(self, name: str, reader) -> None:
        self.values[name] = reader()

    def _bools(self, *names: str) -> None:
        for name in names:
            self.values[name] = self.cursor.read_bool()

    def _i32s(self, count: int) -> Tuple[int, ...]:
        return tuple(self.cursor.read_i32() for _ in range(count))

    def decode(self) -> WorldHeader:
        """Decode the header at the cursor's current position.

        Raises:
            HeaderDecodeError: Any read failure; no partial header is returned
        """
        start = self.cursor.offset
        try:
            self._decode_fields()
        except CursorBoundsError as e:
            raise HeaderDecodeError(
                f"Header truncated at offset {self.cursor.offset}: {e}"
            ) from e
        try:
            header = WorldHeader(**self.values)
        except TypeError as e:
            raise HeaderDecodeError(f"Incomplete header: {e}") from e
        header.validate()
        logger.debug(
            f"Header '{header.map_name}' decoded from {start} to {self.cursor.offset}"
        )
        return header

    def _decode_fields(self) -> None:
        c = self.cursor
        v = self.version
        read = self._read
        bools = self._bools

        read('map_name', c.read_string)
        read('seed_text', c.read_string)
        self.values['world_generator_version'] = c.read_bytes(8)
        guid = c.read_bytes(16)
        self.values['guid'] = guid
        self.values['guid_string'] = parse_guid(guid)
        read('world_id', c.read_i32)
        read('left_world', c.read_i32)
        read('right_world', c.read_i32)
        read('top_world', c.read_i32)
        read('bottom_world', c.read_i32)
        read('max_tiles_y', c.read_i32)
        read('max_tiles_x', c.read_i32)

        if v >= GAME_MODE_VERSION:
            read('game_mode', c.read_i32)
            read('drunk_world', c.read_bool)
            if v >= 227:
                read('get_good_world', c.read_bool)
            if v >= 238:
                read('tenth_anniversary_world', c.read_bool)
            if v >= 239:
                read('dont_starve_world', c.read_bool)
            if v >= 241:
                read('not_the_bees_world', c.read_bool)
            if v >= 249:
                read('remix_world', c.read_bool)
            if v >= 266:
                read('no_traps_world', c.read_bool)
            if v >= 267:
                read('zenith_world', c.read_bool)
        else:
            read('expert_mode', c.read_bool)

        self.values['creation_time'] = c.read_bytes(8)
        read('moon_type', c.read_u8)
        self.values['tree_x'] = self._i32s(3)
        self.values['tree_style'] = self._i32s(4)
        self.values['cave_back_x'] = self._i32s(3)
        self.values['cave_back_style'] = self._i32s(4)
        read('ice_back_style', c.read_i32)
        read('jungle_back_style', c.read_i32)
        read('hell_back_style', c.read_i32)
        read('spawn_tile_x', c.read_i32)
        read('spawn_tile_y', c.read_i32)
        read('world_surface', c.read_f64)
        read('rock_layer', c.read_f64)
        read('temp_time', c.read_f64)
        read('temp_day_time', c.read_bool)
        read('temp_moon_phase', c.read_i32)
        bools('temp_blood_moon', 'temp_eclipse')
        read('dungeon_x', c.read_i32)
        read('dungeon_y', c.read_i32)
        bools(
            'crimson',
            'downed_boss1', 'downed_boss2', 'downed_boss3',
            'downed_queen_bee',
            'downed_mech_boss1', 'downed_mech_boss2', 'downed_mech_boss3',
            'downed_mech_boss_any',
            'downed_plant_boss', 'downed_golem_boss', 'downed_slime_king',
            'saved_goblin', 'saved_wizard', 'saved_mech',
            'downed_goblins', 'downed_clown', 'downed_frost', 'downed_pirates',
            'shadow_orb_smashed', 'spawn_meteor',
        )
        read('shadow_orb_count', c.read_u8)
        read('altar_count', c.read_i32)
        read('hard_mode', c.read_bool)
        if v >= 257:
            read('after_party_of_doom', c.read_bool)
        read('invasion_delay', c.read_i32)
        read('invasion_size', c.read_i32)
        read('invasion_type', c.read_i32)
        read('invasion_x', c.read_f64)
        read('slime_rain_time', c.read_f64)
        read('sundial_cooldown', c.read_u8)
        read('temp_raining', c.read_bool)
        read('temp_rain_time', c.read_i32)
        read('temp_max_rain', c.read_f32)
        read('ore_tier1', c.read_i32)
        read('ore_tier2', c.read_i32)
        read('ore_tier3', c.read_i32)
        self.values['background_styles'] = tuple(c.read_u8() for _ in range(8))
        read('cloud_bg_active', c.read_i32)
        read('num_clouds', c.read_i16)
        read('wind_speed', c.read_f32)

        self.values['angler_who_finished_today'] = tuple(
            c.read_string() for _ in range(c.read_i32())
        )
        read('saved_angler', c.read_bool)
        read('angler_quest', c.read_i32)
        bools('saved_stylist', 'saved_tax_collector')
        if v >= 225:
            read('saved_golfer', c.read_bool)
        read('invasion_size_start', c.read_i32)
        read('temp_cultist_delay', c.read_i32)
        self.values['kill_count'] = self._i32s(c.read_i16())

        bools(
            'fast_forward_time_to_dawn',
            'downed_fishron', 'downed_martians', 'downed_ancient_cultist',
            'downed_moonlord',
            'downed_halloween_king', 'downed_halloween_tree',
            'downed_christmas_ice_queen', 'downed_christmas_santank',
            'downed_christmas_tree',
            'downed_tower_solar', 'downed_tower_vortex',
            'downed_tower_nebula', 'downed_tower_stardust',
            'tower_active_solar', 'tower_active_vortex',
            'tower_active_nebula', 'tower_active_stardust',
            'lunar_apocalypse_is_up',
            'temp_party_manual', 'temp_party_genuine',
        )
        read('temp_party_cooldown', c.read_i32)
        self.values['temp_party_celebrating_npcs'] = self._i32s(c.read_i32())

        read('sandstorm_happening', c.read_bool)
        read('sandstorm_time_left', c.read_i32)
        read('sandstorm_severity', c.read_f32)
        read('sandstorm_intended_severity', c.read_f32)
        bools(
            'saved_bartender',
            'dd2_downed_invasion_t1', 'dd2_downed_invasion_t2',
            'dd2_downed_invasion_t3',
        )

        if v >= 225:
            self.values['extra_background_styles'] = tuple(
                c.read_u8() for _ in range(5)
            )
            read('combat_book_was_used', c.read_bool)
            read('lantern_night_cooldown', c.read_i32)
            bools(
                'lantern_night_genuine', 'lantern_night_manual',
                'lantern_night_next_night_is_genuine',
            )
            self.values['tree_tops_variations'] = self._i32s(c.read_i32())
            bools('force_halloween_for_today', 'force_xmas_for_today')
            read('saved_ore_tier_copper', c.read_i32)
            read('saved_ore_tier_iron', c.read_i32)
            read('saved_ore_tier_silver', c.read_i32)
            read('saved_ore_tier_gold', c.read_i32)
            bools(
                'bought_cat', 'bought_dog', 'bought_bunny',
                'downed_empress_of_light', 'downed_queen_slime',
            )
        if v >= 240:
            read('downed_deerclops', c.read_bool)
        if v >= 269:
            bools(
                'unlocked_slime_blue_spawn', 'unlocked_merchant_spawn',
                'unlocked_demolitionist_spawn', 'unlocked_party_girl_spawn',
                'unlocked_dye_trader_spawn', 'unlocked_truffle_spawn',
                'unlocked_arms_dealer_spawn', 'unlocked_nurse_spawn',
                'unlocked_princess_spawn',
                'combat_book_volume_two_was_used', 'peddlers_satchel_was_used',
                'unlocked_slime_green_spawn', 'unlocked_slime_old_spawn',
                'unlocked_slime_purple_spawn', 'unlocked_slime_rainbow_spawn',
                'unlocked_slime_red_spawn', 'unlocked_slime_yellow_spawn',
                'unlocked_slime_copper_spawn',
                'fast_forward_time_to_dusk',
            )
            read('moondial_cooldown', c.read_u8)


def decode_header(cursor: ByteCursor, version: int) -> WorldHeader:
    """Decode the header section starting at the cursor's position."""
    return HeaderDecoder(cursor, version).decode()
