"""Static colour tables for the world map renderer.

Colours are (R, G, B). Block ids above MAX_KNOWN_TILE_ID are treated as
modded and take a colour from MOD_TILE_COLORS by id modulo its length.
"""
from types import MappingProxyType

from ..parser.constants import LiquidKind

MAX_KNOWN_TILE_ID = 419
HELL_LAYER_OFFSET = 200  # Hell starts this many rows above the world bottom

MISSING_TILE_COLOR = (255, 0, 255)
MISSING_WALL_COLOR = (60, 60, 60)

BG_SKY = (91, 172, 255)
BG_UNDERGROUND = (73, 58, 50)
BG_CAVERN = (52, 40, 32)
BG_HELL = (47, 18, 5)

# Placeholder hues for modded blocks
MOD_TILE_COLORS = (
    (160, 120, 120), (120, 160, 120), (120, 120, 160), (160, 160, 100),
    (100, 160, 160), (160, 100, 160), (140, 140, 120), (120, 140, 140),
)

LIQUID_COLORS = MappingProxyType({
    LiquidKind.WATER: (9, 61, 191),
    LiquidKind.LAVA: (200, 60, 10),
    LiquidKind.HONEY: (180, 140, 20),
    LiquidKind.SHIMMER: (180, 120, 220),
})

DEFAULT_LIQUID_COLOR = LIQUID_COLORS[LiquidKind.WATER]

TILE_COLORS = MappingProxyType({
    0: (151, 107, 75),
    1: (128, 128, 128),
    2: (28, 216, 94),
    3: (27, 197, 109),
    4: (253, 221, 3),
    5: (151, 107, 75),
    6: (140, 101, 80),
    7: (150, 67, 22),
    8: (185, 164, 23),
    9: (185, 194, 195),
    10: (119, 105, 79),
    11: (119, 105, 79),
    12: (174, 24, 69),
    13: (133, 213, 247),
    14: (191, 142, 111),
    15: (191, 142, 111),
    16: (140, 130, 116),
    17: (144, 148, 144),
    18: (191, 142, 111),
    19: (191, 142, 111),
    20: (163, 116, 81),
    21: (233, 207, 94),
    22: (98, 95, 167),
    23: (141, 137, 223),
    24: (122, 116, 218),
    25: (109, 90, 128),
    26: (119, 101, 125),
    27: (226, 196, 49),
    28: (151, 79, 80),
    29: (175, 105, 128),
    30: (170, 120, 84),
    31: (141, 120, 168),
    32: (151, 135, 183),
    33: (253, 221, 3),
    34: (235, 166, 135),
    35: (197, 216, 219),
    36: (230, 89, 92),
    37: (104, 86, 84),
    38: (144, 144, 144),
    39: (181, 62, 59),
    40: (146, 81, 68),
    41: (66, 84, 109),
    42: (251, 235, 127),
    43: (84, 100, 63),
    44: (107, 68, 99),
    45: (185, 164, 23),
    46: (185, 194, 195),
    47: (150, 67, 22),
    48: (128, 128, 128),
    49: (43, 143, 255),
    50: (170, 48, 114),
    51: (192, 202, 203),
    52: (23, 177, 76),
    53: (255, 218, 56),
    54: (200, 246, 254),
    55: (191, 142, 111),
    56: (43, 40, 84),
    57: (68, 68, 76),
    58: (142, 66, 66),
    59: (92, 68, 73),
    60: (143, 215, 29),
    61: (135, 196, 26),
    62: (121, 176, 24),
    63: (110, 140, 182),
    64: (196, 96, 114),
    65: (56, 150, 97),
    66: (160, 118, 58),
    67: (140, 58, 166),
    68: (125, 191, 197),
    69: (190, 150, 92),
    70: (93, 127, 255),
    71: (182, 175, 130),
    72: (182, 175, 130),
    73: (27, 197, 109),
    74: (96, 197, 27),
    75: (36, 36, 36),
    76: (142, 66, 66),
    77: (238, 85, 70),
    78: (121, 110, 97),
    79: (191, 142, 111),
    80: (73, 120, 17),
    81: (245, 133, 191),
    82: (255, 120, 0),
    83: (255, 120, 0),
    84: (255, 120, 0),
    85: (192, 192, 192),
    86: (191, 142, 111),
    87: (191, 142, 111),
    88: (191, 142, 111),
    89: (191, 142, 111),
    90: (144, 148, 144),
    91: (13, 88, 130),
    92: (213, 229, 237),
    93: (253, 221, 3),
    94: (191, 142, 111),
    95: (255, 162, 31),
    96: (144, 148, 144),
    97: (144, 148, 144),
    98: (253, 221, 3),
    99: (144, 148, 144),
    100: (253, 221, 3),
    101: (191, 142, 111),
    102: (229, 212, 73),
    103: (141, 98, 77),
    104: (191, 142, 111),
    105: (144, 148, 144),
    106: (191, 142, 111),
    107: (11, 80, 143),
    108: (91, 169, 169),
    109: (78, 193, 227),
    110: (48, 186, 135),
    111: (128, 26, 52),
    112: (103, 98, 122),
    113: (48, 208, 234),
    114: (191, 142, 111),
    115: (33, 171, 207),
    116: (238, 225, 218),
    117: (181, 172, 190),
    118: (238, 225, 218),
    119: (107, 92, 108),
    120: (92, 68, 73),
    121: (11, 80, 143),
    122: (91, 169, 169),
    123: (106, 107, 118),
    124: (73, 51, 36),
    125: (141, 175, 255),
    126: (159, 209, 229),
    127: (128, 204, 230),
    128: (191, 142, 111),
    129: (255, 117, 224),
    130: (160, 160, 160),
    131: (52, 52, 52),
    132: (144, 148, 144),
    133: (231, 53, 56),
    134: (166, 187, 153),
    135: (253, 114, 114),
    136: (213, 203, 204),
    137: (144, 148, 144),
    138: (96, 96, 96),
    139: (191, 142, 111),
    140: (98, 95, 167),
    141: (192, 59, 59),
    142: (144, 148, 144),
    143: (144, 148, 144),
    144: (144, 148, 144),
    145: (192, 30, 30),
    146: (43, 192, 30),
    147: (211, 236, 241),
    148: (181, 211, 210),
    149: (220, 50, 50),
    150: (128, 26, 52),
    151: (190, 171, 94),
    152: (128, 133, 184),
    153: (239, 141, 126),
    154: (190, 171, 94),
    155: (131, 162, 161),
    156: (170, 171, 157),
    157: (104, 100, 126),
    158: (145, 81, 85),
    159: (148, 133, 98),
    160: (0, 0, 200),
    161: (144, 195, 232),
    162: (184, 219, 240),
    163: (174, 145, 214),
    164: (218, 182, 204),
    165: (100, 100, 100),
    166: (129, 125, 93),
    167: (62, 82, 114),
    168: (132, 157, 127),
    169: (152, 171, 198),
    170: (228, 219, 162),
    171: (33, 135, 85),
    172: (181, 194, 217),
    173: (253, 221, 3),
    174: (253, 221, 3),
    175: (129, 125, 93),
    176: (132, 157, 127),
    177: (152, 171, 198),
    178: (255, 0, 255),
    179: (49, 134, 114),
    180: (126, 134, 49),
    181: (134, 59, 49),
    182: (43, 86, 140),
    183: (121, 49, 134),
    184: (100, 100, 100),
    185: (149, 149, 115),
    186: (255, 0, 255),
    187: (255, 0, 255),
    188: (73, 120, 17),
    189: (223, 255, 255),
    190: (182, 175, 130),
    191: (151, 107, 75),
    192: (26, 196, 84),
    193: (56, 121, 255),
    194: (157, 157, 107),
    195: (134, 22, 34),
    196: (147, 144, 178),
    197: (97, 200, 225),
    198: (62, 61, 52),
    199: (208, 80, 80),
    200: (216, 152, 144),
    201: (203, 61, 64),
    202: (213, 178, 28),
    203: (128, 44, 45),
    204: (125, 55, 65),
    205: (186, 50, 52),
    206: (124, 175, 201),
    207: (144, 148, 144),
    208: (88, 105, 118),
    209: (144, 148, 144),
    210: (192, 59, 59),
    211: (191, 233, 115),
    212: (144, 148, 144),
    213: (137, 120, 67),
    214: (103, 103, 103),
    215: (254, 121, 2),
    216: (191, 142, 111),
    217: (144, 148, 144),
    218: (144, 148, 144),
    219: (144, 148, 144),
    220: (144, 148, 144),
    221: (239, 90, 50),
    222: (231, 96, 228),
    223: (57, 85, 101),
    224: (107, 132, 139),
    225: (227, 125, 22),
    226: (141, 56, 0),
    227: (255, 255, 255),
    228: (144, 148, 144),
    229: (255, 156, 12),
    230: (131, 79, 13),
    231: (224, 194, 101),
    232: (145, 81, 85),
    233: (255, 0, 255),
    234: (53, 44, 41),
    235: (214, 184, 46),
    236: (149, 232, 87),
    237: (255, 241, 51),
    238: (225, 128, 206),
    239: (224, 194, 101),
    240: (99, 50, 30),
    241: (77, 74, 72),
    242: (99, 50, 30),
    243: (140, 179, 254),
    244: (200, 245, 253),
    245: (99, 50, 30),
    246: (99, 50, 30),
    247: (140, 150, 150),
    248: (219, 71, 38),
    249: (249, 52, 243),
    250: (76, 74, 83),
    251: (235, 150, 23),
    252: (153, 131, 44),
    253: (57, 48, 97),
    254: (248, 158, 92),
    255: (107, 49, 154),
    256: (154, 148, 49),
    257: (49, 49, 154),
    258: (49, 154, 68),
    259: (154, 49, 77),
    260: (85, 89, 118),
    261: (154, 83, 49),
    262: (221, 79, 255),
    263: (250, 255, 79),
    264: (79, 102, 255),
    265: (79, 255, 89),
    266: (255, 79, 79),
    267: (240, 240, 247),
    268: (255, 145, 79),
    269: (191, 142, 111),
    270: (122, 217, 232),
    271: (122, 217, 232),
    272: (121, 119, 101),
    273: (128, 128, 128),
    274: (190, 171, 94),
    275: (122, 217, 232),
    276: (122, 217, 232),
    277: (122, 217, 232),
    278: (122, 217, 232),
    279: (122, 217, 232),
    280: (122, 217, 232),
    281: (122, 217, 232),
    282: (122, 217, 232),
    283: (128, 128, 128),
    284: (150, 67, 22),
    285: (122, 217, 232),
    286: (122, 217, 232),
    287: (79, 128, 17),
    288: (122, 217, 232),
    289: (122, 217, 232),
    290: (122, 217, 232),
    291: (122, 217, 232),
    292: (122, 217, 232),
    293: (122, 217, 232),
    294: (122, 217, 232),
    295: (122, 217, 232),
    296: (122, 217, 232),
    297: (122, 217, 232),
    298: (122, 217, 232),
    299: (122, 217, 232),
    300: (144, 148, 144),
    301: (144, 148, 144),
    302: (144, 148, 144),
    303: (144, 148, 144),
    304: (144, 148, 144),
    305: (144, 148, 144),
    306: (144, 148, 144),
    307: (144, 148, 144),
    308: (144, 148, 144),
    309: (122, 217, 232),
    310: (122, 217, 232),
    311: (117, 61, 25),
    312: (204, 93, 73),
    313: (87, 150, 154),
    314: (181, 164, 125),
    315: (235, 114, 80),
    316: (122, 217, 232),
    317: (122, 217, 232),
    318: (122, 217, 232),
    319: (96, 68, 48),
    320: (203, 185, 151),
    321: (96, 77, 64),
    322: (198, 170, 104),
    323: (182, 141, 86),
    324: (228, 213, 173),
    325: (129, 125, 93),
    326: (9, 61, 191),
    327: (253, 32, 3),
    328: (200, 246, 254),
    329: (15, 15, 15),
    330: (226, 118, 76),
    331: (161, 172, 173),
    332: (204, 181, 72),
    333: (190, 190, 178),
    334: (191, 142, 111),
    335: (217, 174, 137),
    336: (253, 62, 3),
    337: (144, 148, 144),
    338: (85, 255, 160),
    339: (122, 217, 232),
    340: (96, 248, 2),
    341: (105, 74, 202),
    342: (29, 240, 255),
    343: (254, 202, 80),
    344: (131, 252, 245),
    345: (255, 156, 12),
    346: (149, 212, 89),
    347: (236, 74, 79),
    348: (44, 26, 233),
    349: (144, 148, 144),
    350: (55, 97, 155),
    351: (31, 31, 31),
    352: (238, 97, 94),
    353: (28, 216, 94),
    354: (141, 107, 89),
    355: (141, 107, 89),
    356: (233, 203, 24),
    357: (168, 178, 204),
    358: (122, 217, 232),
    359: (122, 217, 232),
    360: (122, 217, 232),
    361: (122, 217, 232),
    362: (122, 217, 232),
    363: (122, 217, 232),
    364: (122, 217, 232),
    365: (146, 136, 205),
    366: (223, 232, 233),
    367: (168, 178, 204),
    368: (50, 46, 104),
    369: (50, 46, 104),
    370: (127, 116, 194),
    371: (249, 101, 189),
    372: (252, 128, 201),
    373: (9, 61, 191),
    374: (253, 32, 3),
    375: (255, 156, 12),
    376: (160, 120, 92),
    377: (191, 142, 111),
    378: (160, 120, 100),
    379: (251, 209, 240),
    380: (191, 142, 111),
    381: (254, 121, 2),
    382: (28, 216, 94),
    383: (221, 136, 144),
    384: (131, 206, 12),
    385: (87, 21, 144),
    386: (127, 92, 69),
    387: (127, 92, 69),
    388: (127, 92, 69),
    389: (127, 92, 69),
    390: (253, 32, 3),
    391: (122, 217, 232),
    392: (122, 217, 232),
    393: (122, 217, 232),
    394: (122, 217, 232),
    395: (191, 142, 111),
    396: (198, 124, 78),
    397: (212, 192, 100),
    398: (100, 82, 126),
    399: (77, 76, 66),
    400: (96, 68, 117),
    401: (68, 60, 51),
    402: (174, 168, 186),
    403: (205, 152, 186),
    404: (140, 84, 60),
    405: (140, 140, 140),
    406: (120, 120, 120),
    407: (255, 227, 132),
    408: (85, 83, 82),
    409: (85, 83, 82),
    410: (75, 139, 166),
    411: (227, 46, 46),
    412: (75, 139, 166),
    413: (122, 217, 232),
    414: (122, 217, 232),
    415: (249, 75, 7),
    416: (0, 160, 170),
    417: (160, 87, 234),
    418: (22, 173, 254),
    419: (117, 125, 151),
    420: (255, 255, 255),
    421: (73, 70, 70),
    422: (73, 70, 70),
    423: (255, 255, 255),
    424: (146, 155, 187),
    425: (174, 195, 215),
    426: (77, 11, 35),
    427: (119, 22, 52),
    428: (255, 255, 255),
    429: (63, 63, 63),
    430: (23, 119, 79),
    431: (23, 54, 119),
    432: (119, 68, 23),
    433: (74, 23, 119),
    434: (78, 82, 109),
    435: (39, 168, 96),
    436: (39, 94, 168),
    437: (168, 121, 39),
    438: (111, 39, 168),
    439: (150, 148, 174),
    440: (255, 255, 255),
    441: (255, 255, 255),
    442: (3, 144, 201),
    443: (123, 123, 123),
    444: (191, 176, 124),
    445: (55, 55, 73),
    446: (255, 66, 152),
    447: (179, 132, 255),
    448: (0, 206, 180),
    449: (91, 186, 240),
    450: (92, 240, 91),
    451: (240, 91, 147),
    452: (255, 150, 181),
    453: (255, 255, 255),
    454: (174, 16, 176),
    455: (48, 255, 110),
    456: (179, 132, 255),
    457: (255, 255, 255),
    458: (211, 198, 111),
    459: (190, 223, 232),
    460: (141, 163, 181),
    461: (255, 222, 100),
    462: (231, 178, 28),
    463: (155, 214, 240),
    464: (233, 183, 128),
    465: (51, 84, 195),
    466: (205, 153, 73),
    467: (233, 207, 94),
    468: (255, 255, 255),
    469: (191, 142, 111),
    583: (113, 113, 113),
    584: (113, 113, 113),
    585: (113, 113, 113),
    587: (113, 113, 113),
    588: (113, 113, 113),
    589: (113, 113, 113),
    596: (110, 91, 77),
    616: (133, 79, 77),
})

WALL_COLORS = MappingProxyType({
    0: (0, 0, 0),
    1: (53, 53, 53),
    2: (87, 60, 48),
    3: (47, 41, 53),
    4: (69, 50, 37),
    5: (59, 59, 59),
    6: (76, 44, 41),
    7: (46, 50, 67),
    8: (49, 61, 61),
    9: (75, 46, 70),
    10: (107, 91, 34),
    11: (79, 85, 86),
    12: (101, 57, 25),
    13: (77, 48, 43),
    14: (12, 12, 12),
    15: (49, 43, 44),
    16: (81, 63, 54),
    17: (46, 50, 67),
    18: (49, 61, 61),
    19: (75, 46, 70),
    20: (12, 12, 12),
    21: (54, 89, 98),
    22: (97, 92, 94),
    23: (56, 44, 58),
    24: (49, 40, 42),
    25: (18, 66, 98),
    26: (34, 64, 54),
    27: (58, 48, 42),
    28: (77, 70, 81),
    29: (112, 58, 68),
    30: (56, 115, 80),
    31: (94, 101, 108),
    32: (102, 20, 48),
    33: (48, 48, 73),
    34: (86, 83, 57),
    35: (54, 59, 82),
    36: (124, 70, 63),
    37: (89, 84, 55),
    38: (60, 90, 70),
    39: (89, 89, 84),
    40: (100, 118, 129),
    41: (57, 55, 64),
    42: (62, 25, 27),
    43: (60, 55, 44),
    44: (51, 51, 51),
    45: (65, 63, 57),
    46: (68, 83, 69),
    47: (66, 70, 82),
    48: (78, 69, 83),
    49: (81, 74, 63),
    50: (56, 66, 81),
    51: (50, 73, 59),
    52: (82, 59, 64),
    53: (70, 79, 81),
    54: (46, 58, 54),
    55: (56, 56, 46),
    56: (57, 49, 49),
    57: (45, 51, 56),
    58: (56, 48, 59),
    59: (80, 63, 55),
    60: (0, 49, 17),
    61: (55, 40, 28),
    62: (32, 28, 22),
    63: (25, 67, 38),
    64: (47, 67, 25),
    65: (25, 67, 38),
    66: (25, 67, 38),
    67: (47, 67, 25),
    68: (25, 67, 38),
    69: (36, 37, 57),
    70: (25, 61, 67),
    71: (82, 108, 134),
    72: (45, 84, 24),
    73: (211, 217, 219),
    74: (54, 60, 113),
    75: (61, 61, 44),
    76: (26, 51, 111),
    77: (75, 18, 22),
    78: (58, 35, 24),
    79: (36, 33, 65),
    80: (54, 60, 113),
    81: (101, 52, 52),
    82: (56, 19, 0),
    83: (62, 44, 45),
    84: (78, 105, 131),
    85: (32, 39, 45),
    86: (121, 80, 36),
    87: (28, 8, 10),
    88: (115, 68, 124),
    89: (129, 114, 74),
    90: (62, 86, 123),
    91: (90, 121, 94),
    92: (135, 62, 61),
    93: (100, 96, 103),
    94: (36, 48, 57),
    95: (48, 46, 58),
    96: (71, 46, 73),
    97: (76, 46, 64),
    98: (51, 63, 57),
    99: (49, 58, 64),
    100: (36, 48, 57),
    101: (48, 46, 58),
    102: (71, 46, 73),
    103: (76, 46, 64),
    104: (51, 63, 57),
    105: (49, 58, 64),
    106: (97, 72, 51),
    107: (53, 53, 53),
    108: (121, 80, 36),
    109: (110, 37, 19),
    110: (135, 57, 137),
    111: (33, 25, 21),
    112: (28, 8, 10),
    113: (160, 75, 7),
    114: (54, 42, 19),
    115: (42, 30, 53),
    116: (60, 34, 25),
    117: (91, 83, 64),
    118: (59, 61, 54),
    119: (47, 39, 25),
    120: (80, 88, 111),
    121: (186, 167, 138),
    122: (110, 119, 143),
    123: (138, 128, 110),
    124: (7, 48, 30),
    125: (78, 103, 70),
    126: (109, 111, 123),
    127: (112, 166, 226),
    128: (69, 56, 140),
    129: (72, 44, 145),
    130: (114, 85, 121),
    131: (104, 119, 158),
    132: (74, 74, 74),
    133: (95, 119, 191),
    134: (144, 79, 22),
    135: (62, 130, 138),
    136: (61, 98, 169),
    137: (183, 84, 14),
    138: (61, 57, 69),
    139: (74, 32, 34),
    140: (110, 100, 76),
    141: (66, 70, 60),
    142: (214, 206, 187),
    143: (83, 106, 99),
    144: (89, 67, 68),
    145: (120, 120, 120),
    146: (103, 55, 24),
    147: (77, 77, 77),
    148: (229, 218, 161),
    149: (82, 70, 65),
    150: (81, 69, 62),
    151: (103, 76, 36),
    152: (103, 76, 36),
    153: (255, 116, 63),
    154: (191, 63, 255),
    155: (219, 219, 232),
    156: (63, 255, 71),
    157: (118, 63, 37),
    158: (81, 37, 118),
    159: (64, 67, 89),
    160: (37, 118, 52),
    161: (118, 37, 58),
    162: (37, 37, 118),
    163: (118, 113, 37),
    164: (255, 63, 63),
    165: (63, 81, 255),
    166: (239, 255, 63),
    167: (78, 77, 58),
    168: (84, 97, 84),
    169: (92, 105, 90),
    170: (93, 68, 47),
    171: (84, 60, 39),
    172: (168, 125, 0),
    173: (49, 105, 25),
    174: (69, 48, 54),
    175: (33, 50, 188),
    176: (75, 128, 148),
    177: (72, 50, 46),
    178: (120, 127, 143),
    179: (124, 131, 148),
    180: (15, 16, 45),
    181: (31, 31, 74),
    182: (57, 55, 99),
    183: (120, 127, 143),
    184: (15, 16, 45),
    185: (61, 61, 61),
    186: (55, 23, 100),
    187: (126, 68, 43),
    188: (63, 47, 63),
    189: (65, 51, 77),
    190: (67, 72, 59),
    191: (60, 38, 67),
    192: (123, 56, 47),
    193: (87, 24, 26),
    194: (102, 64, 53),
    195: (122, 46, 54),
    196: (99, 70, 55),
    197: (102, 73, 57),
    198: (92, 65, 49),
    199: (106, 75, 58),
    200: (81, 33, 83),
    201: (96, 79, 99),
    202: (124, 42, 104),
    203: (111, 54, 112),
    204: (75, 68, 55),
    205: (83, 83, 59),
    206: (39, 67, 44),
    207: (77, 77, 55),
    208: (92, 36, 28),
    209: (96, 48, 39),
    210: (108, 44, 26),
    211: (106, 42, 38),
    212: (70, 69, 61),
    213: (57, 60, 57),
    214: (69, 57, 59),
    215: (71, 60, 66),
    216: (148, 93, 52),
    217: (51, 38, 65),
    218: (43, 24, 22),
    219: (78, 73, 114),
    220: (54, 36, 68),
    221: (73, 18, 12),
    222: (58, 47, 81),
    223: (115, 65, 34),
    224: (103, 112, 104),
    225: (76, 71, 56),
    226: (133, 124, 66),
    227: (83, 101, 112),
    228: (139, 0, 64),
    229: (80, 12, 162),
    230: (0, 93, 81),
    231: (81, 68, 62),
    232: (37, 47, 57),
    233: (72, 53, 55),
    234: (103, 46, 48),
    235: (126, 68, 43),
    236: (63, 35, 34),
    237: (57, 34, 33),
    238: (45, 46, 54),
    239: (43, 52, 56),
    240: (62, 45, 33),
    241: (146, 95, 53),
    242: (78, 69, 55),
    243: (23, 52, 86),
    244: (58, 35, 24),
    245: (74, 74, 74),
    246: (47, 41, 53),
    247: (49, 43, 44),
    248: (77, 70, 81),
    249: (100, 118, 129),
    250: (78, 69, 83),
    251: (81, 74, 63),
    252: (56, 66, 81),
    253: (50, 73, 59),
    254: (82, 59, 64),
    255: (70, 79, 81),
    256: (46, 58, 54),
    257: (56, 56, 46),
    258: (57, 49, 49),
    259: (45, 51, 56),
    260: (56, 48, 59),
    261: (80, 63, 55),
    262: (55, 40, 28),
    263: (32, 28, 22),
    264: (36, 37, 57),
    265: (25, 61, 67),
    266: (82, 108, 134),
    267: (36, 33, 65),
    268: (101, 52, 52),
    269: (62, 44, 45),
    270: (93, 68, 47),
    271: (84, 60, 39),
    272: (120, 127, 143),
    273: (15, 16, 45),
    274: (61, 61, 61),
    275: (126, 68, 43),
    276: (63, 47, 63),
    277: (65, 51, 77),
    278: (67, 72, 59),
    279: (60, 38, 67),
    280: (123, 56, 47),
    281: (87, 24, 26),
    282: (102, 64, 53),
    283: (122, 46, 54),
    284: (99, 70, 55),
    285: (102, 73, 57),
    286: (92, 65, 49),
    287: (106, 75, 58),
    288: (81, 33, 83),
    289: (96, 79, 99),
    290: (124, 42, 104),
    291: (111, 54, 112),
    292: (75, 68, 55),
    293: (83, 83, 59),
    294: (39, 67, 44),
    295: (77, 77, 55),
    296: (92, 36, 28),
    297: (96, 48, 39),
    298: (108, 44, 26),
    299: (106, 42, 38),
    300: (70, 69, 61),
    301: (57, 60, 57),
    302: (69, 57, 59),
    303: (71, 60, 66),
    304: (148, 93, 52),
    305: (51, 38, 65),
    306: (43, 24, 22),
    307: (78, 73, 114),
    308: (54, 36, 68),
    309: (73, 18, 12),
    310: (58, 47, 81),
    311: (115, 65, 34),
    312: (36, 65, 16),
    313: (33, 61, 19),
    314: (74, 58, 44),
    315: (114, 120, 45),
    316: (58, 52, 64),
    317: (80, 70, 82),
    318: (6, 6, 34),
    319: (91, 48, 82),
    320: (66, 39, 27),
    321: (62, 83, 108),
    322: (58, 84, 115),
    323: (99, 94, 105),
    324: (80, 92, 104),
    325: (56, 95, 124),
    326: (92, 94, 80),
    327: (62, 102, 116),
    328: (98, 103, 105),
    329: (87, 92, 118),
    330: (84, 89, 105),
    331: (42, 44, 81),
    332: (34, 66, 26),
    333: (64, 25, 49),
    334: (76, 66, 32),
    335: (60, 65, 67),
    336: (76, 45, 32),
    337: (37, 36, 59),
    338: (57, 34, 32),
    339: (19, 43, 60),
    340: (42, 67, 60),
    341: (104, 23, 0),
    342: (91, 9, 65),
    343: (17, 89, 43),
    344: (5, 65, 94),
    345: (58, 6, 81),
    346: (255, 0, 255),
    347: (255, 0, 255),
    348: (255, 0, 255),
    349: (255, 0, 255),
    350: (255, 0, 255),
    351: (255, 0, 255),
    352: (255, 0, 255),
    353: (255, 0, 255),
    354: (255, 0, 255),
    355: (255, 0, 255),
    356: (255, 0, 255),
    357: (255, 0, 255),
    358: (255, 0, 255),
    359: (255, 0, 255),
    360: (255, 0, 255),
    361: (255, 0, 255),
    362: (255, 0, 255),
    363: (255, 0, 255),
    364: (255, 0, 255),
    365: (255, 0, 255),
    366: (255, 0, 255),
})
