"""Colour data for the first half of the built-in themes.

Each entry maps the lookup key of a theme to its display name and its
colours as (r, g, b) triples; every colour is fully opaque.
"""

from __future__ import annotations

Rgb = tuple[int, int, int]

PALETTES: dict[str, tuple[str, tuple[Rgb, ...]]] = {
    "catppuccin": (
        "Catpuccin",
        (
            (245, 224, 220),
            (242, 205, 205),
            (245, 194, 231),
            (203, 166, 247),
            (243, 139, 168),
            (235, 160, 172),
            (250, 179, 135),
            (249, 226, 175),
            (166, 227, 161),
            (148, 226, 213),
            (137, 220, 235),
            (116, 199, 236),
            (137, 180, 250),
            (180, 190, 254),
            (205, 214, 244),
            (186, 194, 222),
            (166, 173, 200),
            (147, 153, 178),
            (127, 132, 156),
            (108, 112, 134),
            (88, 91, 112),
            (69, 71, 90),
            (49, 50, 68),
            (30, 30, 46),
            (24, 24, 37),
            (17, 17, 27),
        ),
    ),
    "nord": (
        "Nord",
        (
            (46, 52, 64),
            (59, 66, 82),
            (67, 76, 94),
            (76, 86, 106),
            (216, 222, 233),
            (229, 233, 240),
            (236, 239, 244),
            (143, 188, 187),
            (136, 192, 208),
            (129, 161, 193),
            (94, 129, 172),
            (191, 97, 106),
            (208, 135, 112),
            (235, 203, 139),
            (163, 190, 140),
            (180, 142, 173),
        ),
    ),
    "everforest": (
        "Everforest",
        (
            (35, 42, 46),
            (45, 53, 59),
            (52, 63, 68),
            (61, 72, 77),
            (71, 82, 88),
            (79, 88, 94),
            (86, 99, 95),
            (84, 58, 72),
            (81, 64, 69),
            (66, 80, 71),
            (58, 81, 93),
            (77, 76, 67),
            (211, 198, 170),
            (230, 126, 128),
            (230, 152, 117),
            (219, 188, 127),
            (167, 192, 128),
            (131, 192, 146),
            (127, 187, 179),
            (214, 153, 182),
            (122, 132, 120),
            (133, 146, 137),
            (157, 169, 160),
        ),
    ),
    "solarized": (
        "Solarized",
        (
            (0, 43, 54),
            (7, 54, 66),
            (88, 110, 117),
            (101, 123, 131),
            (131, 148, 150),
            (147, 161, 161),
            (238, 232, 213),
            (253, 246, 227),
            (181, 137, 0),
            (203, 75, 22),
            (220, 50, 47),
            (211, 54, 130),
            (108, 113, 196),
            (38, 139, 210),
            (42, 161, 152),
            (133, 153, 0),
        ),
    ),
    "gruvbox": (
        "Gruvbox",
        (
            (40, 40, 40),
            (29, 32, 33),
            (50, 48, 47),
            (60, 56, 54),
            (80, 73, 69),
            (102, 92, 84),
            (124, 111, 100),
            (235, 219, 178),
            (251, 241, 199),
            (213, 196, 161),
            (189, 174, 147),
            (168, 153, 132),
            (146, 131, 116),
            (204, 36, 29),
            (251, 73, 52),
            (214, 93, 14),
            (254, 128, 25),
            (215, 153, 33),
            (250, 189, 47),
            (152, 151, 26),
            (184, 187, 38),
            (104, 157, 106),
            (142, 192, 124),
            (69, 133, 136),
            (131, 165, 152),
            (177, 98, 134),
            (211, 134, 155),
        ),
    ),
    "dracula": (
        "Dracula",
        (
            (40, 42, 54),
            (68, 71, 90),
            (248, 248, 242),
            (98, 114, 164),
            (139, 233, 253),
            (80, 250, 123),
            (255, 184, 108),
            (255, 121, 198),
            (189, 147, 249),
            (255, 85, 85),
            (241, 250, 140),
        ),
    ),
    "tokyo-moon": (
        "Tokyo_Moon",
        (
            (34, 36, 54),
            (27, 29, 43),
            (130, 170, 255),
            (68, 74, 115),
            (130, 170, 255),
            (134, 225, 252),
            (195, 232, 141),
            (252, 167, 234),
            (255, 117, 127),
            (200, 211, 245),
            (255, 199, 119),
            (200, 211, 245),
            (134, 225, 252),
            (200, 211, 245),
            (195, 232, 141),
            (192, 153, 255),
            (255, 117, 127),
            (45, 63, 118),
            (130, 139, 184),
            (255, 199, 119),
        ),
    ),
    "onedark": (
        "Onedark",
        (
            (24, 26, 31),
            (40, 44, 52),
            (49, 53, 63),
            (57, 63, 74),
            (59, 63, 76),
            (33, 37, 43),
            (115, 184, 241),
            (235, 208, 156),
            (171, 178, 191),
            (198, 120, 221),
            (152, 195, 121),
            (209, 154, 102),
            (97, 175, 239),
            (229, 192, 123),
            (86, 182, 194),
            (232, 102, 113),
            (92, 99, 112),
            (132, 139, 152),
            (43, 111, 119),
            (153, 57, 57),
            (147, 105, 29),
            (138, 63, 160),
            (49, 57, 43),
            (56, 43, 44),
            (28, 52, 72),
            (44, 83, 114),
        ),
    ),
    "srcery": (
        "Srcery",
        (
            (28, 27, 25),
            (239, 47, 39),
            (81, 159, 80),
            (251, 184, 41),
            (44, 120, 191),
            (224, 44, 109),
            (10, 174, 179),
            (186, 166, 127),
            (145, 129, 117),
            (247, 83, 65),
            (152, 188, 55),
            (254, 208, 110),
            (104, 168, 228),
            (255, 92, 143),
            (43, 228, 208),
            (252, 232, 195),
        ),
    ),
    "monokai": (
        "Monokai",
        (
            (39, 40, 34),
            (248, 248, 242),
            (255, 85, 85),
            (255, 121, 198),
            (189, 147, 249),
            (80, 250, 123),
            (255, 184, 108),
            (241, 250, 140),
            (39, 40, 34),
            (248, 248, 242),
            (255, 85, 85),
            (255, 121, 198),
            (189, 147, 249),
            (80, 250, 123),
            (255, 184, 108),
            (241, 250, 140),
        ),
    ),
    "material": (
        "Material",
        (
            (38, 50, 56),
            (255, 83, 112),
            (156, 39, 176),
            (103, 58, 183),
            (33, 150, 243),
            (3, 169, 244),
            (0, 188, 212),
            (0, 150, 136),
            (76, 175, 80),
            (139, 195, 74),
            (205, 220, 57),
            (255, 235, 59),
            (255, 193, 7),
            (255, 152, 0),
            (255, 87, 34),
            (121, 85, 72),
        ),
    ),
    "synthwave-84": (
        "Synthwave84",
        (
            (24, 25, 31),
            (42, 43, 50),
            (52, 54, 64),
            (72, 73, 83),
            (108, 108, 131),
            (139, 139, 172),
            (161, 161, 191),
            (196, 196, 214),
            (255, 83, 108),
            (255, 129, 137),
            (192, 128, 255),
            (127, 159, 255),
            (255, 195, 70),
            (255, 255, 153),
            (255, 163, 103),
            (191, 191, 222),
        ),
    ),
    "atomdark": (
        "AtomDark",
        (
            (26, 32, 44),
            (204, 102, 102),
            (102, 204, 102),
            (204, 204, 102),
            (102, 204, 204),
            (204, 204, 204),
            (204, 102, 102),
            (204, 204, 102),
            (102, 204, 102),
            (102, 204, 204),
            (204, 204, 204),
            (204, 102, 102),
            (102, 204, 102),
            (204, 204, 102),
            (102, 204, 204),
            (26, 32, 44),
        ),
    ),
    "oceanic-next": (
        "Oceanic Next",
        (
            (28, 34, 40),
            (232, 102, 97),
            (118, 195, 115),
            (248, 185, 79),
            (102, 143, 220),
            (145, 151, 158),
            (102, 143, 220),
            (232, 102, 97),
            (122, 136, 149),
            (145, 151, 158),
            (248, 185, 79),
            (118, 195, 115),
            (102, 143, 220),
            (145, 151, 158),
            (28, 34, 40),
        ),
    ),
    "shades-of-purple": (
        "Shades of Purple",
        (
            (25, 20, 30),
            (209, 103, 139),
            (162, 195, 252),
            (209, 119, 255),
            (128, 186, 249),
            (153, 134, 159),
            (128, 186, 249),
            (209, 103, 139),
            (120, 106, 120),
            (153, 134, 159),
            (209, 119, 255),
            (162, 195, 252),
            (128, 186, 249),
            (153, 134, 159),
            (25, 20, 30),
        ),
    ),
}