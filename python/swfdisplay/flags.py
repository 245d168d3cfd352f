'''
Bit layouts of the packed flag words.

Each layout is a tuple of (name, shift, mask, type). A field's value is
(word >> shift) & mask, converted with type. Bit 0 is the least significant.
'''

DROP_SHADOW_FLAGS = (
    ('passes',              0, 0b11111, int),
    ('composite_source',    5, 1, bool),
    ('knockout',            6, 1, bool),
    ('inner',               7, 1, bool),
)

# the glow filter shares the drop shadow layout
GLOW_FLAGS = DROP_SHADOW_FLAGS

# bevel, gradient bevel and gradient glow
BEVEL_FLAGS = (
    ('passes',              0, 0b1111, int),
    ('on_top',              4, 1, bool),
    ('composite_source',    5, 1, bool),
    ('knockout',            6, 1, bool),
    ('inner',               7, 1, bool),
)

# bits 0-2 are reserved
BLUR_FLAGS = (
    ('passes',              3, 0b11111, int),
)

# bits 2-7 are reserved
CONVOLUTION_FLAGS = (
    ('preserve_alpha',      0, 1, bool),
    ('clamp',               1, 1, bool),
)

GRADIENT_FLAGS = (
    ('spread',              6, 0b11, int),
    ('color_space',         4, 0b11, int),
    ('color_count',         0, 0b1111, int),
)

CLIP_EVENT_FLAGS = (
    ('load',                0, 1, bool),
    ('enter_frame',         1, 1, bool),
    ('unload',              2, 1, bool),
    ('mouse_move',          3, 1, bool),
    ('mouse_down',          4, 1, bool),
    ('mouse_up',            5, 1, bool),
    ('key_down',            6, 1, bool),
    ('key_up',              7, 1, bool),
    ('data',                8, 1, bool),
    ('initialize',          9, 1, bool),
    ('press',              10, 1, bool),
    ('release',            11, 1, bool),
    ('release_outside',    12, 1, bool),
    ('roll_over',          13, 1, bool),
    ('roll_out',           14, 1, bool),
    ('drag_over',          15, 1, bool),
    ('drag_out',           16, 1, bool),
    ('key_press',          17, 1, bool),
    ('construct',          18, 1, bool),
)


def unpackFlags(word, layout):
    '''Split an integer word into a dict of named fields.
    '''
    fields = {}
    for name, shift, mask, field_type in layout:
        fields[name] = field_type((word >> shift) & mask)
    return fields


def layoutMask(layout):
    '''Return the union of all bits used by a layout.
    '''
    used = 0
    for _name, shift, mask, _field_type in layout:
        used |= mask << shift
    return used
