"""
Lookup tables for isoband marching squares.

Corners of a cell are numbered counter-clockwise starting bottom left::

    x3 ---- x2
    |        |
    |        |
    x0 ---- x1

Each corner is classified against the band as below (0), within (1) or
above (2) and the four classes are packed two bits per corner into the
cell code ``x0 + 4 * x1 + 16 * x2 + 64 * x3``.

A shape is a list of directed edge fragments. A fragment is written as
``(enter, start, end, (dx, dy, next_enter))``: ``enter`` labels the side
and end at which the tracer enters the cell, ``start`` and ``end`` are
``(side, variant)`` pairs locating the two fragment points on the cell
sides, and the move names the neighbouring cell and the label the walk
continues with there.

Entry labels combine the side with the end of that side, ``"LB"`` is the
bottom end of the left side, ``"BL"`` the left end of the bottom side.
Side variants select the crossing that is computed: ``"ab"`` for a side
crossed once, ``"a"`` and ``"b"`` for the first and the second crossing
of a side crossed by both thresholds.

Shapes are adapted from the isobands implementation of
https://github.com/RaumZeit/MarchingSquares.js
"""

#: Corners interpolated along each side, as indices into (x0, x1, x2, x3)
side_corners = {
    "B": (0, 1),
    "R": (1, 2),
    "T": (3, 2),
    "L": (0, 3),
}

shape_table = {
    "triangle_bl": [
        ("LB", ("L", "ab"), ("B", "ab"), (0, -1, "TL")),
    ],
    "triangle_br": [
        ("BR", ("B", "ab"), ("R", "ab"), (1, 0, "LB")),
    ],
    "triangle_tr": [
        ("RT", ("R", "ab"), ("T", "ab"), (0, 1, "BR")),
    ],
    "triangle_tl": [
        ("TL", ("T", "ab"), ("L", "ab"), (-1, 0, "RT")),
    ],
    "tetragon_t": [
        ("RT", ("R", "ab"), ("L", "ab"), (-1, 0, "RT")),
    ],
    "tetragon_r": [
        ("BR", ("B", "ab"), ("T", "ab"), (0, 1, "BR")),
    ],
    "tetragon_b": [
        ("LB", ("L", "ab"), ("R", "ab"), (1, 0, "LB")),
    ],
    "tetragon_l": [
        ("TL", ("T", "ab"), ("B", "ab"), (0, -1, "TL")),
    ],
    "tetragon_bl": [
        ("BL", ("B", "a"), ("L", "a"), (-1, 0, "RB")),
        ("LT", ("L", "b"), ("B", "b"), (0, -1, "TR")),
    ],
    "tetragon_br": [
        ("BL", ("B", "a"), ("R", "b"), (1, 0, "LT")),
        ("RB", ("R", "a"), ("B", "b"), (0, -1, "TR")),
    ],
    "tetragon_tr": [
        ("RB", ("R", "a"), ("T", "a"), (0, 1, "BL")),
        ("TR", ("T", "b"), ("R", "b"), (1, 0, "LT")),
    ],
    "tetragon_tl": [
        ("TR", ("T", "b"), ("L", "a"), (-1, 0, "RB")),
        ("LT", ("L", "b"), ("T", "a"), (0, 1, "BL")),
    ],
    "tetragon_lr": [
        ("LT", ("L", "b"), ("R", "b"), (1, 0, "LT")),
        ("RB", ("R", "a"), ("L", "a"), (-1, 0, "RB")),
    ],
    "tetragon_tb": [
        ("TR", ("T", "b"), ("B", "b"), (0, -1, "TR")),
        ("BL", ("B", "a"), ("T", "a"), (0, 1, "BL")),
    ],
    "pentagon_tr": [
        ("TL", ("T", "ab"), ("R", "ab"), (1, 0, "LB")),
    ],
    "pentagon_tl": [
        ("LB", ("L", "ab"), ("T", "ab"), (0, 1, "BR")),
    ],
    "pentagon_br": [
        ("RT", ("R", "ab"), ("B", "ab"), (0, -1, "TL")),
    ],
    "pentagon_bl": [
        ("BR", ("B", "ab"), ("L", "ab"), (-1, 0, "RT")),
    ],
    "pentagon_tr_rl": [
        ("TL", ("T", "ab"), ("R", "b"), (1, 0, "LT")),
        ("RB", ("R", "a"), ("L", "ab"), (-1, 0, "RT")),
    ],
    "pentagon_rb_bt": [
        ("RT", ("R", "ab"), ("B", "b"), (0, -1, "TR")),
        ("BL", ("B", "a"), ("T", "ab"), (0, 1, "BR")),
    ],
    "pentagon_bl_lr": [
        ("BR", ("B", "ab"), ("L", "a"), (-1, 0, "RB")),
        ("LT", ("L", "b"), ("R", "ab"), (1, 0, "LB")),
    ],
    "pentagon_lt_tb": [
        ("LB", ("L", "ab"), ("T", "a"), (0, 1, "BL")),
        ("TR", ("T", "b"), ("B", "ab"), (0, -1, "TL")),
    ],
    "pentagon_bl_tb": [
        ("BL", ("B", "a"), ("L", "ab"), (-1, 0, "RT")),
        ("TL", ("T", "ab"), ("B", "b"), (0, -1, "TR")),
    ],
    "pentagon_lt_rl": [
        ("LT", ("L", "b"), ("T", "ab"), (0, 1, "BR")),
        ("RT", ("R", "ab"), ("L", "a"), (-1, 0, "RB")),
    ],
    "pentagon_tr_bt": [
        ("BR", ("B", "ab"), ("T", "a"), (0, 1, "BL")),
        ("TR", ("T", "b"), ("R", "ab"), (1, 0, "LB")),
    ],
    "pentagon_rb_lr": [
        ("LB", ("L", "ab"), ("R", "b"), (1, 0, "LT")),
        ("RB", ("R", "a"), ("B", "ab"), (0, -1, "TL")),
    ],
    "hexagon_lt_tr": [
        ("LB", ("L", "ab"), ("T", "a"), (0, 1, "BL")),
        ("TR", ("T", "b"), ("R", "ab"), (1, 0, "LB")),
    ],
    "hexagon_bl_lt": [
        ("BR", ("B", "ab"), ("L", "a"), (-1, 0, "RB")),
        ("LT", ("L", "b"), ("T", "ab"), (0, 1, "BR")),
    ],
    "hexagon_bl_rb": [
        ("BL", ("B", "a"), ("L", "ab"), (-1, 0, "RT")),
        ("RT", ("R", "ab"), ("B", "b"), (0, -1, "TR")),
    ],
    "hexagon_tr_rb": [
        ("TL", ("T", "ab"), ("R", "b"), (1, 0, "LT")),
        ("RB", ("R", "a"), ("B", "ab"), (0, -1, "TL")),
    ],
    "hexagon_lt_rb": [
        ("LB", ("L", "ab"), ("T", "ab"), (0, 1, "BR")),
        ("RT", ("R", "ab"), ("B", "ab"), (0, -1, "TL")),
    ],
    "hexagon_bl_tr": [
        ("BR", ("B", "ab"), ("L", "ab"), (-1, 0, "RT")),
        ("TL", ("T", "ab"), ("R", "ab"), (1, 0, "LB")),
    ],
    "heptagon_tr": [
        ("BL", ("B", "a"), ("L", "a"), (-1, 0, "RB")),
        ("LT", ("L", "b"), ("T", "ab"), (0, 1, "BR")),
        ("RT", ("R", "ab"), ("B", "b"), (0, -1, "TR")),
    ],
    "heptagon_bl": [
        ("LB", ("L", "ab"), ("T", "a"), (0, 1, "BL")),
        ("TR", ("T", "b"), ("R", "b"), (1, 0, "LT")),
        ("RB", ("R", "a"), ("B", "ab"), (0, -1, "TL")),
    ],
    "heptagon_tl": [
        ("BL", ("B", "a"), ("L", "ab"), (-1, 0, "RT")),
        ("TL", ("T", "ab"), ("R", "b"), (1, 0, "LT")),
        ("RB", ("R", "a"), ("B", "b"), (0, -1, "TR")),
    ],
    "heptagon_br": [
        ("BR", ("B", "ab"), ("L", "a"), (-1, 0, "RB")),
        ("LT", ("L", "b"), ("T", "a"), (0, 1, "BL")),
        ("TR", ("T", "b"), ("R", "ab"), (1, 0, "LB")),
    ],
    "octagon": [
        ("BL", ("B", "a"), ("L", "a"), (-1, 0, "RB")),
        ("LT", ("L", "b"), ("T", "a"), (0, 1, "BL")),
        ("TR", ("T", "b"), ("R", "b"), (1, 0, "LT")),
        ("RB", ("R", "a"), ("B", "b"), (0, -1, "TR")),
    ],
}

#: Cell codes whose shapes do not depend on the cell centre. Cells fully
#: below, fully above or fully within the band produce no fragments.
code_table = {
    0: (),
    170: (),
    85: (),
    169: ("triangle_bl",),
    1: ("triangle_bl",),
    166: ("triangle_br",),
    4: ("triangle_br",),
    154: ("triangle_tr",),
    16: ("triangle_tr",),
    106: ("triangle_tl",),
    64: ("triangle_tl",),
    168: ("tetragon_bl",),
    2: ("tetragon_bl",),
    162: ("tetragon_br",),
    8: ("tetragon_br",),
    138: ("tetragon_tr",),
    32: ("tetragon_tr",),
    42: ("tetragon_tl",),
    128: ("tetragon_tl",),
    5: ("tetragon_b",),
    165: ("tetragon_b",),
    20: ("tetragon_r",),
    150: ("tetragon_r",),
    80: ("tetragon_t",),
    90: ("tetragon_t",),
    65: ("tetragon_l",),
    105: ("tetragon_l",),
    160: ("tetragon_lr",),
    10: ("tetragon_lr",),
    130: ("tetragon_tb",),
    40: ("tetragon_tb",),
    101: ("pentagon_tr",),
    69: ("pentagon_tr",),
    149: ("pentagon_tl",),
    21: ("pentagon_tl",),
    86: ("pentagon_bl",),
    84: ("pentagon_bl",),
    89: ("pentagon_br",),
    81: ("pentagon_br",),
    96: ("pentagon_tr_rl",),
    74: ("pentagon_tr_rl",),
    24: ("pentagon_rb_bt",),
    146: ("pentagon_rb_bt",),
    6: ("pentagon_bl_lr",),
    164: ("pentagon_bl_lr",),
    129: ("pentagon_lt_tb",),
    41: ("pentagon_lt_tb",),
    66: ("pentagon_bl_tb",),
    104: ("pentagon_bl_tb",),
    144: ("pentagon_lt_rl",),
    26: ("pentagon_lt_rl",),
    36: ("pentagon_tr_bt",),
    134: ("pentagon_tr_bt",),
    9: ("pentagon_rb_lr",),
    161: ("pentagon_rb_lr",),
    37: ("hexagon_lt_tr",),
    133: ("hexagon_lt_tr",),
    148: ("hexagon_bl_lt",),
    22: ("hexagon_bl_lt",),
    82: ("hexagon_bl_rb",),
    88: ("hexagon_bl_rb",),
    73: ("hexagon_tr_rb",),
    97: ("hexagon_tr_rb",),
    145: ("hexagon_lt_rb",),
    25: ("hexagon_lt_rb",),
    70: ("hexagon_bl_tr",),
    100: ("hexagon_bl_tr",),
}

#: Saddle codes, resolved by the class of the cell centre average
#: (0 below, 1 within, 2 above the band).
saddle_table = {
    17: {
        0: ("triangle_bl", "triangle_tr"),
        1: ("hexagon_lt_rb",),
        2: ("hexagon_lt_rb",),
    },
    68: {
        0: ("triangle_tl", "triangle_br"),
        1: ("hexagon_bl_tr",),
        2: ("hexagon_bl_tr",),
    },
    153: {
        0: ("hexagon_lt_rb",),
        1: ("hexagon_lt_rb",),
        2: ("triangle_bl", "triangle_tr"),
    },
    102: {
        0: ("hexagon_bl_tr",),
        1: ("hexagon_bl_tr",),
        2: ("triangle_tl", "triangle_br"),
    },
    152: {
        0: ("heptagon_tr",),
        1: ("heptagon_tr",),
        2: ("triangle_tr", "tetragon_bl"),
    },
    137: {
        0: ("heptagon_bl",),
        1: ("heptagon_bl",),
        2: ("triangle_bl", "tetragon_tr"),
    },
    98: {
        0: ("heptagon_tl",),
        1: ("heptagon_tl",),
        2: ("triangle_tl", "tetragon_br"),
    },
    38: {
        0: ("heptagon_br",),
        1: ("heptagon_br",),
        2: ("triangle_br", "tetragon_tl"),
    },
    18: {
        0: ("triangle_tr", "tetragon_bl"),
        1: ("heptagon_tr",),
        2: ("heptagon_tr",),
    },
    33: {
        0: ("triangle_bl", "tetragon_tr"),
        1: ("heptagon_bl",),
        2: ("heptagon_bl",),
    },
    72: {
        0: ("triangle_tl", "tetragon_br"),
        1: ("heptagon_tl",),
        2: ("heptagon_tl",),
    },
    132: {
        0: ("triangle_br", "tetragon_tl"),
        1: ("heptagon_br",),
        2: ("heptagon_br",),
    },
    136: {
        0: ("tetragon_tl", "tetragon_br"),
        1: ("octagon",),
        2: ("tetragon_bl", "tetragon_tr"),
    },
    34: {
        0: ("tetragon_bl", "tetragon_tr"),
        1: ("octagon",),
        2: ("tetragon_tl", "tetragon_br"),
    },
}
