'''
Decoded display records.

Every record is built once from keyword arguments and is read-only after
that. Fields not passed keep their class-level default.
'''
from enum import IntEnum

class Record(object):
    '''
    Base class of all decoded structures
    '''

    @classmethod
    def fieldNames(cls):
        names = []
        for klass in reversed(cls.__mro__):
            for name, value in vars(klass).items():
                if name.startswith('_') or name == 'kind' or callable(value) or isinstance(value, classmethod):
                    continue
                if name not in names:
                    names.append(name)
        return names

    def __init__(self, **fields):
        names = self.fieldNames()
        for name, value in fields.items():
            if name not in names:
                raise TypeError(type(self).__name__ + ' has no field ' + repr(name))
            object.__setattr__(self, name, value)

    def __setattr__(self, name, value):
        raise AttributeError(type(self).__name__ + ' is read-only')

    def __delattr__(self, name):
        raise AttributeError(type(self).__name__ + ' is read-only')

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return all(getattr(self, name) == getattr(other, name) for name in self.fieldNames())

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None

    def __repr__(self):
        fields = ', '.join(name + '=' + repr(getattr(self, name)) for name in self.fieldNames())
        return type(self).__name__ + '(' + fields + ')'


class BlendMode(IntEnum):
    NORMAL = 1
    LAYER = 2
    MULTIPLY = 3
    SCREEN = 4
    LIGHTEN = 5
    DARKEN = 6
    DIFFERENCE = 7
    ADD = 8
    SUBTRACT = 9
    INVERT = 10
    ALPHA = 11
    ERASE = 12
    OVERLAY = 13
    HARDLIGHT = 14

class GradientSpread(IntEnum):
    PAD = 0
    REFLECT = 1
    REPEAT = 2

class ColorSpace(IntEnum):
    SRGB = 0
    LINEAR_RGB = 1

class FilterKind(IntEnum):
    DROP_SHADOW = 0
    BLUR = 1
    GLOW = 2
    BEVEL = 3
    GRADIENT_GLOW = 4
    CONVOLUTION = 5
    COLOR_MATRIX = 6
    GRADIENT_BEVEL = 7


class RGBA(Record):
    red = None
    green = None
    blue = None
    alpha = None

class ColorStop(Record):
    ratio = None
    color = None

class MorphColorStop(Record):
    ratio = None
    color = None
    morph_ratio = None
    morph_color = None

class Gradient(Record):
    spread = None
    color_space = None
    colors = None

class MorphGradient(Gradient):
    pass


class Filter(Record):
    kind = None

class DropShadowFilter(Filter):
    kind = FilterKind.DROP_SHADOW
    color = None
    blur_x = None
    blur_y = None
    angle = None
    distance = None
    strength = None
    inner = None
    knockout = None
    composite_source = None
    passes = None

class BlurFilter(Filter):
    kind = FilterKind.BLUR
    blur_x = None
    blur_y = None
    passes = None

class GlowFilter(Filter):
    kind = FilterKind.GLOW
    color = None
    blur_x = None
    blur_y = None
    strength = None
    inner = None
    knockout = None
    composite_source = None
    passes = None

class BevelFilter(Filter):
    kind = FilterKind.BEVEL
    shadow_color = None
    highlight_color = None
    blur_x = None
    blur_y = None
    angle = None
    distance = None
    strength = None
    inner = None
    knockout = None
    composite_source = None
    on_top = None
    passes = None

class GradientGlowFilter(Filter):
    kind = FilterKind.GRADIENT_GLOW
    gradient = None
    blur_x = None
    blur_y = None
    angle = None
    distance = None
    strength = None
    inner = None
    knockout = None
    composite_source = None
    on_top = None
    passes = None

class GradientBevelFilter(GradientGlowFilter):
    kind = FilterKind.GRADIENT_BEVEL

class ConvolutionFilter(Filter):
    kind = FilterKind.CONVOLUTION
    matrix_width = None
    matrix_height = None
    divisor = None
    bias = None
    matrix = None
    default_color = None
    clamp = None
    preserve_alpha = None

class ColorMatrixFilter(Filter):
    kind = FilterKind.COLOR_MATRIX
    matrix = None


class ClipEventFlags(Record):
    load = False
    enter_frame = False
    unload = False
    mouse_move = False
    mouse_down = False
    mouse_up = False
    key_down = False
    key_up = False
    data = False
    initialize = False
    press = False
    release = False
    release_outside = False
    roll_over = False
    roll_out = False
    drag_over = False
    drag_out = False
    key_press = False
    construct = False

class ClipAction(Record):
    events = None
    key_code = None
    actions = None
