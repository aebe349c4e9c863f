"""Colour data for the second half of the built-in themes.

Each entry maps the lookup key of a theme to its display name and its
colours as (r, g, b) triples; every colour is fully opaque.
"""

from __future__ import annotations

Rgb = tuple[int, int, int]

PALETTES: dict[str, tuple[str, tuple[Rgb, ...]]] = {
    "tokyo-storm": (
        "Tokyo-storm",
        (
            (36, 40, 59),
            (31, 35, 53),
            (41, 46, 66),
            (192, 202, 245),
            (169, 177, 214),
            (59, 66, 97),
            (122, 162, 247),
            (61, 89, 161),
            (42, 195, 222),
            (13, 185, 215),
            (137, 221, 255),
            (180, 249, 248),
            (57, 75, 112),
            (86, 95, 137),
            (125, 207, 255),
            (84, 92, 126),
            (115, 122, 162),
            (158, 206, 106),
            (115, 218, 202),
            (65, 166, 181),
            (187, 154, 247),
            (255, 0, 124),
            (255, 158, 100),
            (157, 124, 216),
            (247, 118, 142),
            (219, 75, 75),
            (26, 188, 156),
            (65, 72, 104),
            (224, 175, 104),
        ),
    ),
    "tokyo-dark": (
        "Tokyo-dark",
        (
            (26, 27, 38),
            (22, 22, 30),
            (41, 46, 66),
            (192, 202, 245),
            (169, 177, 214),
            (59, 66, 97),
            (122, 162, 247),
            (61, 89, 161),
            (42, 195, 222),
            (13, 185, 215),
            (137, 221, 255),
            (180, 249, 248),
            (57, 75, 112),
            (86, 95, 137),
            (125, 207, 255),
            (84, 92, 126),
            (115, 122, 162),
            (158, 206, 106),
            (115, 218, 202),
            (65, 166, 181),
            (187, 154, 247),
            (255, 0, 124),
            (255, 158, 100),
            (157, 124, 216),
            (247, 118, 142),
            (219, 75, 75),
            (26, 188, 156),
            (65, 72, 104),
            (224, 175, 104),
        ),
    ),
    "arcdark": (
        "Arc Dark",
        (
            (33, 33, 33),
            (255, 85, 85),
            (138, 191, 80),
            (255, 186, 77),
            (63, 127, 255),
            (136, 136, 136),
            (63, 127, 255),
            (255, 85, 85),
            (70, 70, 70),
            (136, 136, 136),
            (255, 186, 77),
            (138, 191, 80),
            (63, 127, 255),
            (136, 136, 136),
            (33, 33, 33),
        ),
    ),
    "sunset-aurant": (
        "Sunset Aurant",
        (
            (0, 0, 0),
            (255, 255, 255),
            (201, 144, 252),
            (214, 233, 187),
            (200, 160, 239),
            (198, 151, 242),
            (47, 176, 215),
            (211, 151, 88),
            (201, 144, 252),
            (247, 196, 215),
            (251, 165, 200),
            (224, 147, 30),
            (56, 62, 48),
            (86, 95, 74),
            (123, 134, 106),
            (165, 180, 144),
            (243, 136, 19),
        ),
    ),
    "sunset-saffron": (
        "Sunset Saffron",
        (
            (29, 32, 33),
            (251, 241, 199),
            (254, 128, 25),
            (142, 192, 124),
            (211, 134, 155),
            (250, 189, 47),
            (131, 165, 152),
            (254, 128, 25),
            (29, 32, 33),
            (40, 40, 40),
            (60, 56, 54),
            (146, 131, 116),
            (80, 73, 69),
            (102, 92, 84),
            (124, 111, 100),
            (168, 153, 132),
            (0, 0, 0),
            (251, 241, 199),
        ),
    ),
    "sunset-tangerine": (
        "Sunset Tangerine",
        (
            (255, 87, 51),
            (255, 218, 51),
            (51, 255, 87),
            (51, 138, 255),
            (255, 51, 245),
            (51, 230, 255),
            (255, 87, 51),
            (255, 133, 51),
            (255, 207, 51),
            (51, 255, 107),
            (51, 166, 255),
            (255, 51, 181),
            (51, 247, 255),
            (255, 87, 51),
            (255, 168, 51),
            (255, 217, 51),
            (0, 0, 0),
            (255, 255, 255),
        ),
    ),
    "cyberpunk": (
        "Cyber-punk",
        (
            (0, 0, 0),
            (255, 0, 255),
            (255, 255, 0),
            (0, 255, 255),
            (0, 255, 0),
            (255, 0, 0),
            (0, 0, 255),
            (255, 165, 0),
            (75, 0, 130),
            (238, 130, 238),
            (135, 206, 235),
            (255, 105, 180),
            (139, 0, 255),
            (255, 20, 147),
            (0, 128, 128),
            (255, 0, 255),
            (0, 0, 139),
            (255, 69, 0),
            (64, 224, 208),
            (186, 85, 211),
            (255, 182, 193),
        ),
    ),
    "night-owl": (
        "Night-owl",
        (
            (0, 43, 54),
            (7, 54, 66),
            (88, 110, 117),
            (101, 123, 131),
            (147, 161, 161),
            (203, 75, 22),
            (88, 110, 117),
            (39, 150, 135),
            (0, 113, 133),
            (211, 54, 130),
            (131, 148, 150),
            (52, 101, 36),
            (229, 229, 229),
            (191, 97, 106),
            (236, 139, 67),
            (85, 139, 47),
            (102, 120, 105),
            (0, 128, 128),
            (240, 232, 196),
            (124, 45, 75),
        ),
    ),
    "github-light": (
        "GitHub-Light",
        (
            (255, 255, 255),
            (243, 243, 243),
            (235, 235, 235),
            (189, 189, 189),
            (102, 102, 102),
            (81, 81, 81),
            (0, 0, 0),
            (69, 69, 69),
            (238, 0, 0),
            (255, 153, 51),
            (34, 139, 34),
            (0, 0, 255),
            (148, 0, 211),
            (75, 0, 130),
            (102, 51, 153),
            (204, 204, 204),
            (170, 170, 170),
            (120, 120, 120),
            (170, 119, 204),
            (255, 69, 0),
            (255, 105, 180),
            (153, 204, 255),
        ),
    ),
    "rose-pine": (
        "RosePine",
        (
            (25, 23, 36),
            (31, 29, 46),
            (38, 35, 58),
            (110, 106, 134),
            (144, 140, 170),
            (224, 222, 244),
            (235, 111, 146),
            (246, 193, 119),
            (235, 188, 186),
            (49, 116, 143),
            (156, 207, 216),
            (196, 167, 231),
            (33, 32, 46),
            (64, 61, 82),
            (82, 79, 103),
        ),
    ),
    "kanagawa": (
        "Kanagawa",
        (
            (101, 133, 148),
            (156, 171, 202),
            (255, 93, 98),
            (192, 163, 110),
            (230, 195, 132),
            (106, 149, 137),
            (255, 160, 102),
            (152, 187, 108),
            (228, 104, 118),
            (127, 180, 202),
            (149, 127, 184),
            (126, 156, 216),
            (122, 168, 159),
            (210, 126, 153),
            (232, 36, 36),
            (147, 138, 169),
            (45, 79, 103),
            (45, 79, 103),
            (34, 50, 73),
            (114, 113, 105),
            (220, 215, 186),
            (22, 22, 29),
            (30, 31, 40),
            (42, 42, 55),
            (54, 54, 70),
            (84, 84, 109),
        ),
    ),
    "cat-frappe": (
        "cat-frappe",
        (
            (242, 213, 207),
            (238, 190, 190),
            (244, 184, 228),
            (202, 158, 230),
            (231, 130, 132),
            (234, 153, 156),
            (239, 159, 118),
            (229, 200, 144),
            (166, 209, 137),
            (129, 200, 190),
            (153, 209, 219),
            (133, 193, 220),
            (140, 170, 238),
            (186, 187, 241),
            (198, 208, 245),
            (181, 191, 226),
            (165, 173, 206),
            (148, 156, 187),
            (131, 139, 167),
            (115, 121, 148),
            (98, 104, 128),
            (81, 87, 109),
            (65, 69, 89),
            (48, 52, 70),
            (41, 44, 60),
            (35, 38, 52),
        ),
    ),
    "cat-latte": (
        "cat-latte",
        (
            (220, 138, 120),  # Rosewater
            (221, 120, 120),  # Flamingo
            (234, 118, 203),  # Pink
            (136, 57, 239),  # Mauve
            (210, 15, 57),  # Red
            (230, 69, 83),  # Maroon
            (254, 100, 11),  # Peach
            (223, 142, 29),  # Yellow
            (64, 160, 43),  # Green
            (23, 146, 153),  # Teal
            (4, 165, 229),  # Sky
            (32, 159, 181),  # Sapphire
            (30, 102, 245),  # Blue
            (114, 135, 253),  # Lavender
            (76, 79, 105),  # Text
            (92, 95, 119),  # Subtext1
            (108, 111, 133),  # Subtext0
            (124, 127, 147),  # Overlay2
            (140, 143, 161),  # Overlay1
            (156, 160, 176),  # Overlay0
            (172, 176, 190),  # Surface2
            (188, 192, 204),  # Surface1
            (204, 208, 218),  # Surface0
            (239, 241, 245),  # Base
            (230, 233, 239),  # Mantle
            (220, 224, 232),  # Crust
        ),
    ),
    "melange-dark": (
        "melange-dark",
        (
            (37, 37, 48),
            (239, 241, 245),
            (233, 137, 137),
            (228, 183, 129),
            (238, 212, 149),
            (167, 192, 128),
            (140, 170, 238),
            (184, 161, 227),
            (101, 107, 131),
            (75, 80, 104),
            (149, 156, 189),
            (52, 58, 74),
        ),
    ),
    "melange-light": (
        "melange-light",
        (
            (250, 248, 245),
            (92, 84, 119),
            (204, 102, 102),
            (222, 147, 95),
            (240, 198, 116),
            (181, 189, 104),
            (129, 162, 190),
            (178, 148, 187),
            (150, 152, 150),
            (197, 200, 198),
            (137, 138, 154),
            (234, 232, 229),
        ),
    ),
}